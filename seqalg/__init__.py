"""
seqalg: generic sequence and set algorithms with pluggable equality rules.
"""

# expose the algorithms
from .extensions.core import where, skip_while, concat
from .extensions.set import distinct, except_, intersect, union
from .extensions.terminal import (
    all_,
    any_,
    contains,
    count,
    element_at,
    first,
    last,
    single,
    sequence_equal
)

# expose equality rules
from .equality import EqualityRule, RuleSet, DEFAULT, IGNORE_CASE, by_key

# expose the fluent wrapper and its factories
from .enumerable import Enumerable
from .factories import from_iterable, from_range, empty, once, seq, P

# expose results, failures and sequence types
from .types import (
    Result,
    Success,
    Failure,
    SequenceError,
    IndexOutOfRangeError,
    NoMatchError,
    MultipleMatchesError,
    SequenceReusedError,
    SingleUseSequence
)

# define what `import *` does
__all__ = [
    "where",
    "skip_while",
    "concat",
    "distinct",
    "except_",
    "intersect",
    "union",
    "all_",
    "any_",
    "contains",
    "count",
    "element_at",
    "first",
    "last",
    "single",
    "sequence_equal",
    "EqualityRule",
    "RuleSet",
    "DEFAULT",
    "IGNORE_CASE",
    "by_key",
    "Enumerable",
    "from_iterable",
    "from_range",
    "empty",
    "once",
    "seq",
    "P",
    "Result",
    "Success",
    "Failure",
    "SequenceError",
    "IndexOutOfRangeError",
    "NoMatchError",
    "MultipleMatchesError",
    "SequenceReusedError",
    "SingleUseSequence"
]
