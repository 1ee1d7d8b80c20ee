from __future__ import annotations
from .types import *

# key of the single bucket used by rules that only define equals
_SHARED_BUCKET = object()


class EqualityRule(Generic[T]):
    """
    a pluggable notion of equality over T.
    equals decides whether two elements are the same, key derives the
    hashable bucket an element belongs to. elements that are equal must
    share a key, otherwise set operations will miss them.
    """

    def __init__(self, equals: Optional[Equals[T]] = None,
                 key: Optional[KeySelector[T, Hashable]] = None,
                 name: str = "custom"):
        self._equals = equals
        self._key = key
        self.name = name

    def equals(self, a: T, b: T) -> bool:
        if self._equals is not None:
            return self._equals(a, b)
        if self._key is not None:
            return self._key(a) == self._key(b)
        return a is b or a == b

    def key(self, item: T) -> Hashable:
        if self._key is not None:
            return self._key(item)
        if self._equals is not None:
            # rules with only equals put every element in one bucket
            return _SHARED_BUCKET
        return item

    def __repr__(self) -> str:
        return f"EqualityRule({self.name})"


def by_key(key_selector: KeySelector[T, Hashable], name: str = "by_key") -> EqualityRule[T]:
    """elements are equal when their derived keys are equal"""
    return EqualityRule(key=key_selector, name=name)


def _fold(text: str) -> str:
    return text.casefold()


# intrinsic python equality, the fallback for every equality-sensitive operation
DEFAULT: EqualityRule[Any] = EqualityRule(name="default")

# case-insensitive text comparison, e.g. "b" and "B" are one element
IGNORE_CASE: EqualityRule[str] = EqualityRule(
    equals=lambda a, b: _fold(a) == _fold(b),
    key=_fold,
    name="ignore_case"
)


class RuleSet(Generic[T]):
    """
    membership set whose notion of 'same element' comes from an EqualityRule.
    elements are bucketed by rule.key and compared with rule.equals inside
    the bucket, so rules whose equals is finer than their key still work.
    elements whose key cannot be hashed are kept in one linear list.
    """

    def __init__(self, rule: Optional[EqualityRule[T]] = None, items: Iterable[T] = ()):
        self._rule = rule if rule is not None else DEFAULT
        self._buckets: Dict[Hashable, List[T]] = {}
        self._unhashable: List[T] = []
        self._size = 0
        for item in items:
            self.add(item)

    def _bucket(self, item: T, create: bool = False) -> Optional[List[T]]:
        key = self._rule.key(item)
        try:
            hash(key)
        except TypeError:
            return self._unhashable
        if create:
            return self._buckets.setdefault(key, [])
        return self._buckets.get(key)

    def add(self, item: T) -> bool:
        """add item, returning false if an equal element was already present"""
        bucket = self._bucket(item, create=True)
        if any(self._rule.equals(member, item) for member in bucket):
            return False
        bucket.append(item)
        self._size += 1
        return True

    def __contains__(self, item: T) -> bool:
        bucket = self._bucket(item)
        if not bucket:
            return False
        return any(self._rule.equals(member, item) for member in bucket)

    def __len__(self) -> int:
        return self._size
