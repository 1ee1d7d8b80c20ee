from __future__ import annotations

from .types import *

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.terminal import TerminalAccessor

# --- base enumerable implementation ---

class _BaseEnumerable(Generic[T]):
    def __init__(self, data: Iterable[T]):
        """init by reading the source once into a private list"""
        self._data: List[T] = list(data)

    def _get_data(self) -> List[T]:
        """get the underlying data as a list"""
        return self._data

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"

# --- main enumerable class ---

class Enumerable(
    _BaseEnumerable[T],
    _CoreOperations[T]
):
    """
    a linq-inspired, eager wrapper around a materialized sequence.
    every operation runs immediately and returns a new Enumerable (or a
    scalar / Result from the terminal accessor).
    """
    def __init__(self, data: Iterable[T]):
        super().__init__(data)
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.to = TerminalAccessor(self)
