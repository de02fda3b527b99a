"""0/1 knapsack by dynamic programming and the greedy fractional knapsack."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field


@dataclass(frozen=True)
class KnapsackStep:
    """One item placed by the fractional knapsack, in the order it was taken."""

    item: int
    weight: int
    profit: int
    fraction: float
    space_left: float

    @property
    def complete(self) -> bool:
        """Whether the whole item was taken."""
        return self.fraction >= 1.0


@dataclass
class FractionalResult:
    """Outcome of the fractional knapsack: total value and the steps taken."""

    total_value: float = 0.0
    steps: list[KnapsackStep] = field(default_factory=list)


def _check_items(weights: Sequence[int], profits: Sequence[int]) -> None:
    if len(weights) != len(profits):
        raise ValueError(
            f"got {len(weights)} weights but {len(profits)} profits"
        )


def knapsack_table(
    weights: Sequence[int], profits: Sequence[int], capacity: int
) -> list[list[int]]:
    """Return the (n+1) x (capacity+1) table of best profits.

    Row ``i`` holds the best profit using the first ``i`` items for every
    capacity from 0 to ``capacity``.
    """
    _check_items(weights, profits)
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    if any(w < 0 for w in weights):
        raise ValueError("weights must not be negative")

    table = [[0] * (capacity + 1)]
    for weight, profit in zip(weights, profits):
        previous = table[-1]
        row = [0]
        for cap in range(1, capacity + 1):
            if weight > cap:
                row.append(previous[cap])
            else:
                row.append(max(previous[cap], previous[cap - weight] + profit))
        table.append(row)
    return table


def knapsack(weights: Sequence[int], profits: Sequence[int], capacity: int) -> int:
    """Return the maximum profit of the 0/1 knapsack."""
    return knapsack_table(weights, profits, capacity)[-1][-1]


def fractional_knapsack(
    weights: Sequence[int], profits: Sequence[int], capacity: float
) -> FractionalResult:
    """Fill the knapsack greedily by profit/weight ratio, splitting the last item.

    Items are taken in order of decreasing ratio; among equal ratios the
    earlier item goes first.
    """
    _check_items(weights, profits)
    if any(w <= 0 for w in weights):
        raise ValueError("weights must be positive")

    ratios = [profit / weight for weight, profit in zip(weights, profits)]
    remaining = sorted(range(len(weights)), key=lambda idx: (-ratios[idx], idx))

    result = FractionalResult()
    space = capacity
    for index in remaining:
        if space <= 0:
            break
        weight, profit = weights[index], profits[index]
        if weight <= space:
            space -= weight
            result.total_value += profit
            fraction = 1.0
        else:
            fraction = space / weight
            result.total_value += profit * fraction
            space = 0
        result.steps.append(
            KnapsackStep(
                item=index + 1,
                weight=weight,
                profit=profit,
                fraction=fraction,
                space_left=space,
            )
        )
    return result