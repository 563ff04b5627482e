import random
from typing import List, Optional, Sequence, TypeVar

T = TypeVar('T')


def sample_without_replacement(items: Sequence[T], k: int,
                               rng: Optional[random.Random] = None) -> List[T]:
    """
    Uniformly pick ``k`` distinct positions from ``items``.

    Runs a partial Fisher-Yates shuffle over a copy of the input, so only the
    first ``k`` slots are shuffled and the caller's sequence is left alone.
    When ``k`` is at least the number of items, every item is returned in
    random order.

    Args:
        items: Population to draw from
        k: Number of items wanted
        rng: Random source, defaults to a freshly seeded generator

    Returns:
        List of sampled items
    """
    if rng is None:
        rng = random.Random()
    pool = list(items)
    count = min(max(k, 0), len(pool))

    for i in range(count):
        j = rng.randrange(i, len(pool))
        pool[i], pool[j] = pool[j], pool[i]

    return pool[:count]


def unique_in_order(items: Sequence[T]) -> List[T]:
    """Drop repeated items, keeping the first occurrence of each."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
