from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from itertools import zip_longest
from ..types import *
from ..equality import EqualityRule, DEFAULT

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

# fill value for zip_longest, distinguishable from any real element
_MISSING = object()


# --- quantifiers and membership ---

def all_(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if every element satisfies the predicate; true for an empty sequence"""
    return all(predicate(x) for x in source)


def any_(source: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if at least one element satisfies the predicate"""
    return any(predicate(x) for x in source)


def contains(source: Iterable[T], value: T, rule: Optional[EqualityRule[T]] = None) -> bool:
    """true if some element is equal to value under the rule"""
    rule = rule if rule is not None else DEFAULT
    return any(rule.equals(item, value) for item in source)


def count(source: Iterable[T], predicate: Predicate[T]) -> int:
    """number of elements satisfying the predicate"""
    return sum(1 for x in source if predicate(x))


# --- positional selection ---

def element_at(source: Iterable[T], index: int) -> Result[T]:
    """element at a zero-based index, visiting no further than that index"""
    if index < 0:
        return Failure(IndexOutOfRangeError(index))
    for position, item in enumerate(source):
        if position == index:
            return Success(item)
    return Failure(IndexOutOfRangeError(index))


def first(source: Iterable[T], predicate: Predicate[T]) -> Result[T]:
    """first element satisfying the predicate"""
    for item in source:
        if predicate(item):
            return Success(item)
    return Failure(NoMatchError())


def last(source: Iterable[T], predicate: Predicate[T]) -> Result[T]:
    """last element satisfying the predicate; always reads the whole sequence"""
    found = False
    match = None
    for item in source:
        if predicate(item):
            found, match = True, item
    return Success(match) if found else Failure(NoMatchError())


def single(source: Iterable[T], predicate: Predicate[T]) -> Result[T]:
    """
    the only element satisfying the predicate.
    fails as soon as a second match turns up; a success is only reported
    after the whole sequence has been checked.
    """
    found = False
    match = None
    for item in source:
        if predicate(item):
            if found:
                return Failure(MultipleMatchesError())
            found, match = True, item
    if not found:
        return Failure(NoMatchError("sequence contains no matching elements"))
    return Success(match)


# --- comparison ---

def sequence_equal(first: Iterable[T], second: Iterable[T],
                   rule: Optional[EqualityRule[T]] = None) -> bool:
    """same length and pairwise equal elements, compared in lock-step"""
    if first is second:
        return True
    rule = rule if rule is not None else DEFAULT
    for a, b in zip_longest(first, second, fillvalue=_MISSING):
        if a is _MISSING or b is _MISSING:
            return False
        if not rule.equals(a, b):
            return False
    return True


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to list (a fresh copy)"""
        return list(self._enumerable._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return count(self._enumerable._get_data(), predicate)

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._enumerable._get_data()
        if predicate is None: return len(data) > 0
        return any_(data, predicate)

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return all_(self._enumerable._get_data(), predicate)

    def contains(self, value: T, rule: Optional[EqualityRule[T]] = None) -> bool:
        """check if an element equal to value is present"""
        return contains(self._enumerable._get_data(), value, rule)

    def element_at(self, index: int) -> Result[T]:
        """element at a zero-based position"""
        return element_at(self._enumerable._get_data(), index)

    def element_at_or_default(self, index: int, default: Optional[T] = None) -> Optional[T]:
        return self.element_at(index).value_or(default)

    def first(self, predicate: Optional[Predicate[T]] = None) -> Result[T]:
        """get first element"""
        return first(self._enumerable._get_data(), predicate or _always)

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        return self.first(predicate).value_or(default)

    def last(self, predicate: Optional[Predicate[T]] = None) -> Result[T]:
        """get last element"""
        return last(self._enumerable._get_data(), predicate or _always)

    def last_or_default(self, predicate: Optional[Predicate[T]] = None,
                        default: Optional[T] = None) -> Optional[T]:
        return self.last(predicate).value_or(default)

    def single(self, predicate: Optional[Predicate[T]] = None) -> Result[T]:
        """get single element, failing if not exactly one"""
        return single(self._enumerable._get_data(), predicate or _always)

    def single_or_default(self, predicate: Optional[Predicate[T]] = None,
                          default: Optional[T] = None) -> Optional[T]:
        return self.single(predicate).value_or(default)

    def sequence_equal(self, other: Iterable[T], rule: Optional[EqualityRule[T]] = None) -> bool:
        """compare element by element with another sequence"""
        return sequence_equal(self._enumerable._get_data(), other, rule)


def _always(item: Any) -> bool:
    return True
