import random
from typing import Dict, List, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Non-determinism used by the solver: shuffling and sampling."""

    def shuffle(self, items: Sequence[T]) -> List[T]:
        raise NotImplementedError

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        raise NotImplementedError


class SystemRandomSource(RandomSource):
    def __init__(self, seed: Optional[int] = None):
        self._rng = random.Random(seed)

    def shuffle(self, items: Sequence[T]) -> List[T]:
        result = list(items)
        self._rng.shuffle(result)
        return result

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        return self._rng.sample(list(items), k)


class FixedRandomSource(RandomSource):
    """
    Deterministic source for tests.
    Without an order it keeps the input order; with an order, items listed
    there come first (in that order) and the rest keep their input order.
    """

    def __init__(self, order: Optional[Sequence] = None):
        self._rank: Dict = {item: i for i, item in enumerate(order or [])}

    def shuffle(self, items: Sequence[T]) -> List[T]:
        indexed = list(enumerate(items))
        indexed.sort(key=lambda pair: (self._rank.get(pair[1], len(self._rank)), pair[0]))
        return [item for _, item in indexed]

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        if k > len(items):
            raise ValueError("Sample larger than population")
        return self.shuffle(items)[:k]
