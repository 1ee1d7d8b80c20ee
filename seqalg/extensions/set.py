from __future__ import annotations
import typing
from ..types import *
from ..equality import EqualityRule, RuleSet

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def distinct(source: Iterable[T], rule: Optional[EqualityRule[T]] = None) -> List[T]:
    """first occurrence of each distinct element, in original order"""
    seen = RuleSet(rule)
    # 'add' reports whether the element was new, which doubles as the filter
    return [item for item in source if seen.add(item)]


def except_(first: Iterable[T], second: Iterable[T],
            rule: Optional[EqualityRule[T]] = None) -> List[T]:
    """
    elements of first that are not equal to any element of second.
    second is read completely before first; each result appears once.
    """
    excluded = RuleSet(rule, second)
    yielded = RuleSet(rule)
    return [item for item in first if item not in excluded and yielded.add(item)]


def intersect(first: Iterable[T], second: Iterable[T],
              rule: Optional[EqualityRule[T]] = None) -> List[T]:
    """
    elements of first that are equal to some element of second.
    second is read completely before first; each result appears once.
    """
    included = RuleSet(rule, second)
    yielded = RuleSet(rule)
    return [item for item in first if item in included and yielded.add(item)]


def union(first: Iterable[T], second: Iterable[T],
          rule: Optional[EqualityRule[T]] = None) -> List[T]:
    """elements of first then second, duplicates across both collapsed to the first occurrence"""
    seen = RuleSet(rule)
    result = [item for item in first if seen.add(item)]
    result.extend(item for item in second if seen.add(item))
    return result


class SetAccessor(Generic[T]):
    """
    set-theoretic operations over the wrapped sequence.
    every method takes an optional EqualityRule; without one, python's own
    equality is used.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def distinct(self, rule: Optional[EqualityRule[T]] = None) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..enumerable import Enumerable
        return Enumerable(distinct(self._enumerable._get_data(), rule))

    def union(self, other: Iterable[T], rule: Optional[EqualityRule[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        return Enumerable(union(self._enumerable._get_data(), other, rule))

    def intersect(self, other: Iterable[T], rule: Optional[EqualityRule[T]] = None) -> 'Enumerable[T]':
        """return the order-preserving intersection of two sequences."""
        from ..enumerable import Enumerable
        return Enumerable(intersect(self._enumerable._get_data(), other, rule))

    def except_(self, other: Iterable[T], rule: Optional[EqualityRule[T]] = None) -> 'Enumerable[T]':
        """return elements from the first sequence not in the second (set difference)."""
        from ..enumerable import Enumerable
        return Enumerable(except_(self._enumerable._get_data(), other, rule))
