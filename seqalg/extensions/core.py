from __future__ import annotations
import typing
from itertools import chain, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def where(source: Iterable[T], predicate: Predicate[T]) -> List[T]:
    """all elements satisfying the predicate, order preserved"""
    return [x for x in source if predicate(x)]


def skip_while(source: Iterable[T], predicate: Predicate[T]) -> List[T]:
    """
    elements from the first one that fails the predicate onwards.
    once the predicate has returned false it is not called again.
    """
    # dropwhile stops consulting the predicate after the first false
    return list(dropwhile(predicate, source))


def concat(first: Iterable[T], second: Iterable[T]) -> List[T]:
    """every element of first followed by every element of second"""
    return list(chain(first, second))


class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(where(self._get_data(), predicate))

    def skip_while(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """skip elements while predicate is true"""
        from ..enumerable import Enumerable
        return Enumerable(skip_while(self._get_data(), predicate))

    def concat(self: 'Enumerable[T]', other: Iterable[T]) -> 'Enumerable[T]':
        """concatenate with another sequence, preserving all elements and order"""
        from ..enumerable import Enumerable
        return Enumerable(concat(self._get_data(), other))
