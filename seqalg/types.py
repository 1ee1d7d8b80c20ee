from abc import ABC, abstractmethod
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Hashable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')

Predicate = Callable[[T], bool]
KeySelector = Callable[[T], K]
Equals = Callable[[T, T], bool]


# --- failure taxonomy ---

class SequenceError(Exception):
    """base class for every failure raised or carried by seqalg"""


class IndexOutOfRangeError(SequenceError, IndexError):
    """element_at was asked for an index outside [0, length)"""

    def __init__(self, index: int):
        super().__init__(f"index {index} is out of range")
        self.index = index


class NoMatchError(SequenceError, ValueError):
    """no element satisfies the condition"""

    def __init__(self, message: str = "no element satisfies the condition"):
        super().__init__(message)


class MultipleMatchesError(SequenceError, ValueError):
    """more than one element satisfies the condition"""

    def __init__(self, message: str = "sequence contains more than one matching element"):
        super().__init__(message)


class SequenceReusedError(SequenceError, RuntimeError):
    """a single-use sequence was iterated a second time"""

    def __init__(self):
        super().__init__("single-use sequence has already been consumed")


# --- tagged results ---

class Result(ABC, Generic[T]):
    """
    outcome of a selection operation: either a Success holding a value
    or a Failure holding the SequenceError that explains why there is none.
    """
    is_success: bool = False

    @property
    def is_failure(self) -> bool: return not self.is_success

    @abstractmethod
    def unwrap(self) -> T:
        """the success value; raises the carried error on failure"""
        pass

    @abstractmethod
    def value_or(self, default: U) -> Union[T, U]:
        """the success value, or default on failure"""
        pass


class Success(Result[T]):
    is_success = True

    def __init__(self, value: T):
        self.value = value

    def unwrap(self) -> T:
        return self.value

    def value_or(self, default: U) -> Union[T, U]:
        return self.value

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success) and other.value == self.value

    def __hash__(self) -> int:
        return hash(('success', self.value))

    def __repr__(self) -> str:
        return f"Success(value={self.value!r})"


class Failure(Result[Any]):
    is_success = False

    def __init__(self, error: SequenceError):
        self.error = error

    def unwrap(self) -> Any:
        """re-raise the carried error"""
        raise self.error

    def value_or(self, default: U) -> U:
        return default

    def __eq__(self, other: object) -> bool:
        # two failures are the same outcome when they fail for the same reason
        return isinstance(other, Failure) and type(other.error) is type(self.error)

    def __hash__(self) -> int:
        return hash(('failure', type(self.error)))

    def __repr__(self) -> str:
        return f"Failure(error={type(self.error).__name__}: {self.error})"


# --- sequences ---

class SingleUseSequence(Generic[T]):
    """
    a forward-only sequence that can be visited exactly once.
    iterating it a second time raises SequenceReusedError instead of
    silently yielding nothing.
    """

    def __init__(self, data: Iterable[T]):
        self._source = data
        self._consumed = False

    @property
    def consumed(self) -> bool: return self._consumed

    def __iter__(self) -> Iterator[T]:
        if self._consumed:
            raise SequenceReusedError()
        self._consumed = True
        return self._generate()

    def _generate(self) -> Iterator[T]:
        for item in self._source:
            yield item

    def __repr__(self) -> str:
        return f"SingleUseSequence(consumed={self._consumed})"
