"""N-queens by backtracking."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def is_safe(placed: Sequence[int], column: int) -> bool:
    """Whether a queen can go in ``column`` on the row after those in ``placed``.

    ``placed[i]`` is the 1-based column of the queen on row ``i + 1``.
    """
    row = len(placed) + 1
    return all(
        other != column and abs(other - column) != abs(other_row - row)
        for other_row, other in enumerate(placed, start=1)
    )


def n_queens(n: int) -> Iterator[tuple[int, ...]]:
    """Yield every placement of ``n`` non-attacking queens.

    Each solution gives the 1-based column of the queen on each row, and
    solutions come in lexicographic order.
    """
    placed: list[int] = []

    def place_row() -> Iterator[tuple[int, ...]]:
        for column in range(1, n + 1):
            if is_safe(placed, column):
                placed.append(column)
                if len(placed) == n:
                    yield tuple(placed)
                else:
                    yield from place_row()
                placed.pop()

    if n > 0:
        yield from place_row()