import heapq
from collections.abc import Hashable, Mapping
from typing import TypeVar

K = TypeVar("K", bound=Hashable)


def top_k(counts: Mapping[K, int | float], k: int) -> list[tuple[K, int | float]]:
    """
    Extract the k largest entries of a key -> count map.

    Entries come out in non-increasing order of count. Equal counts are
    broken by ascending natural order of the key, so the result is fully
    deterministic and a larger k always extends a smaller k's result.

    Args:
        counts: Mapping of distinct keys to counts (or any numeric score)
        k: Maximum number of entries to return

    Returns:
        List of (key, count) pairs, at most min(k, len(counts)) long
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    if k == 0 or not counts:
        return []

    best = heapq.nsmallest(k, counts.items(), key=lambda item: (-item[1], item[0]))
    return [(key, count) for key, count in best]


def percentage(part: int | float, total: int | float) -> float:
    """
    Share of part in total as a percentage rounded to 4 places.

    A zero total is the "0 of 0" state and yields 0.0.
    """
    if not total:
        return 0.0
    return round(part / total * 100, 4)


def density(count: int, keyspace: int) -> float:
    """Occurrences per unit of keyspace."""
    if keyspace <= 0:
        return 0.0
    return count / keyspace
