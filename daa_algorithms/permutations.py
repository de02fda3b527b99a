"""Permutation generation by swapping and by the Johnson-Trotter algorithm."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from typing import Any

LEFT = -1
RIGHT = 1


def swap_permutations(items: Iterable[Any]) -> Iterator[tuple[Any, ...]]:
    """Yield every ordering of ``items`` by recursive swapping with backtracking."""
    values = list(items)
    last = len(values) - 1
    if last < 0:
        return

    def generate(start: int) -> Iterator[tuple[Any, ...]]:
        if start == last:
            yield tuple(values)
            return
        for i in range(start, last + 1):
            values[start], values[i] = values[i], values[start]
            yield from generate(start + 1)
            values[start], values[i] = values[i], values[start]

    yield from generate(0)


def largest_mobile(perm: Sequence[int], directions: Sequence[int]) -> int:
    """Return the largest mobile element of ``perm``, or 0 when none is mobile.

    An element is mobile when it points (LEFT or RIGHT) at a smaller neighbour.
    """
    mobile = 0
    last = len(perm) - 1
    for i, (value, direction) in enumerate(zip(perm, directions)):
        points_left = direction == LEFT and i != 0 and value > perm[i - 1]
        points_right = direction == RIGHT and i != last and value > perm[i + 1]
        if (points_left or points_right) and value > mobile:
            mobile = value
    return mobile


def johnson_trotter(n: int) -> Iterator[tuple[int, ...]]:
    """Yield permutations of 1..n in Johnson-Trotter order.

    Consecutive permutations differ by one adjacent swap. At most ``2 ** n``
    permutations are produced.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    perm = list(range(1, n + 1))
    directions = [LEFT] * n
    yield tuple(perm)

    for _ in range(1, 1 << n):
        mobile = largest_mobile(perm, directions)
        if mobile == 0:
            return
        pos = perm.index(mobile)
        other = pos + directions[pos]
        perm[pos], perm[other] = perm[other], perm[pos]
        directions[pos], directions[other] = directions[other], directions[pos]
        directions = [
            -direction if value > mobile else direction
            for value, direction in zip(perm, directions)
        ]
        yield tuple(perm)