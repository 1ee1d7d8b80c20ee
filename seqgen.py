'''
seeded random sequences for exercising seqalg.

integer sequences are drawn from a small range so duplicates are common;
word sequences come from faker and are randomly re-cased so that plain and
case-insensitive equality disagree.
'''

import numpy as np
from faker import Faker
from typing import List, Optional, Tuple


class Generator:
    """seeded source of test sequences."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
            self._rng = np.random.default_rng(seed)
        else:
            self._rng = np.random.default_rng()

    def _length(self, length: Optional[int], max_length: int) -> int:
        if length is not None:
            return length
        return int(self._rng.integers(0, max_length, endpoint=True))

    def ints(self, length: Optional[int] = None, low: int = 0, high: int = 9,
             max_length: int = 12) -> List[int]:
        """integers in [low, high]; a narrow range makes repeats likely"""
        n = self._length(length, max_length)
        # convert numpy ints to plain python ints
        return [int(x) for x in self._rng.integers(low, high, size=n, endpoint=True)]

    def vocabulary(self, size: int = 4) -> List[str]:
        return self._fake.words(nb=size, unique=True)

    def words(self, length: Optional[int] = None, pool: Optional[List[str]] = None,
              max_length: int = 10) -> List[str]:
        """words from a tiny faker vocabulary, each randomly upper- or lower-cased"""
        n = self._length(length, max_length)
        pool = pool or self.vocabulary()
        picks = self._rng.choice(pool, size=n)
        flips = self._rng.random(n) < 0.5
        return [str(w).upper() if flip else str(w) for w, flip in zip(picks, flips)]

    def int_pairs(self, count: int, **kwargs) -> List[Tuple[List[int], List[int]]]:
        """count pairs of independent integer sequences"""
        return [(self.ints(**kwargs), self.ints(**kwargs)) for _ in range(count)]

    def word_pairs(self, count: int, **kwargs) -> List[Tuple[List[str], List[str]]]:
        """count pairs of word sequences, each pair sharing one vocabulary"""
        pairs = []
        for _ in range(count):
            pool = self.vocabulary()
            pairs.append((self.words(pool=pool, **kwargs), self.words(pool=pool, **kwargs)))
        return pairs


def from_seed(seed: Optional[int] = None) -> Generator:
    return Generator(seed)
