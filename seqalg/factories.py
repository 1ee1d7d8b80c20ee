import typing
from .types import *

if typing.TYPE_CHECKING:
    from .enumerable import Enumerable

def from_iterable(data: Iterable[T]) -> 'Enumerable[T]':
    """create enumerable from iterable"""
    from .enumerable import Enumerable
    return Enumerable(data)

def from_range(start: int, count: int) -> 'Enumerable[int]':
    """create enumerable from range"""
    from .enumerable import Enumerable
    return Enumerable(range(start, start + count))

def empty() -> 'Enumerable[Any]':
    """create empty enumerable"""
    from .enumerable import Enumerable
    return Enumerable([])

def once(data: Iterable[T]) -> SingleUseSequence[T]:
    """wrap data in a sequence that refuses to be iterated twice"""
    return SingleUseSequence(data)

# --- aliases ---
seq = from_iterable
P = from_iterable
