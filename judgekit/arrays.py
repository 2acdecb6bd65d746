"""Puzzles over sequences, stacks and queues."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Hashable, Iterable, Sequence
from itertools import islice


def max_lit_rows(rows: Iterable[str], k: int) -> int:
    """Most rows fully lit after flipping exactly k columns of a 0/1 lamp grid."""
    if k < 0:
        raise ValueError(f"k must not be negative, got {k}")
    patterns = list(rows)
    if patterns:
        width = len(patterns[0])
        for row in patterns:
            if len(row) != width or set(row) - {"0", "1"}:
                raise ValueError(f"invalid row {row!r}")
    best = 0
    for pattern, count in Counter(patterns).items():
        zeros = pattern.count("0")
        if zeros <= k and zeros % 2 == k % 2:
            best = max(best, count)
    return best


def majority_element(values: Iterable[Hashable]) -> Hashable | None:
    """The value held by more than half of the items, or None if there is none."""
    counts = Counter(values)
    if not counts:
        return None
    value, count = counts.most_common(1)[0]
    total = sum(counts.values())
    return value if count > total // 2 else None


def stack_sequence_ops(target: Sequence[int]) -> list[str] | None:
    """Push ('+') and pop ('-') steps that emit target from 1..n, or None if impossible."""
    size = len(target)
    ops: list[str] = []
    stack: list[int] = []
    next_value = 1
    for value in target:
        while next_value <= min(value, size):
            stack.append(next_value)
            ops.append("+")
            next_value += 1
        if not stack or stack[-1] != value:
            return None
        stack.pop()
        ops.append("-")
    return ops


def repunit_length(n: int) -> int:
    """Fewest ones in a number made only of ones that is divisible by n."""
    if n < 1 or n % 2 == 0 or n % 5 == 0:
        raise ValueError(f"n must be positive and coprime to 10, got {n}")
    remainder = 1 % n
    length = 1
    while remainder:
        remainder = (remainder * 10 + 1) % n
        length += 1
    return length


def merge_cost(sizes: Iterable[int]) -> int:
    """Cost of merging files one by one in ascending order of size."""
    ordered = sorted(sizes)
    if not ordered:
        return 0
    merged = ordered[0]
    cost = 0
    for size in ordered[1:]:
        merged += size
        cost += merged
    return cost


def max_stock_profit(prices: Sequence[int]) -> int:
    """Best profit buying one share a day and selling any held shares at later peaks."""
    profit = 0
    peak = None
    for price in reversed(list(prices)):
        if peak is None or price > peak:
            peak = price
        else:
            profit += peak - price
    return profit


def queuestack(kinds: Sequence[int], initial: Sequence[int], inserts: Sequence[int]) -> list[int]:
    """Values leaving a chain of queues (0) and stacks (1) as each insert is pushed through."""
    kinds = list(kinds)
    initial = list(initial)
    inserts = list(inserts)
    if len(kinds) != len(initial):
        raise ValueError("kinds and initial must have the same length")
    if any(kind not in (0, 1) for kind in kinds):
        raise ValueError("kinds must hold only 0 (queue) or 1 (stack)")
    line = deque(reversed([value for kind, value in zip(kinds, initial) if kind == 0]))
    line.extend(inserts)
    return list(islice(line, len(inserts)))