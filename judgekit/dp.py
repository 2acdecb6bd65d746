"""Dynamic-programming solutions to counting and optimisation puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

FIB_LIMIT = 40
SUM_123_LIMIT = 10
TILE_LIMIT = 80
START_HEALTH = 100
MAX_CARD = 34


def fibonacci_call_counts(n: int) -> tuple[int, int]:
    """Return how often naive recursive fib(n) reaches fib(0) and fib(1)."""
    if not 0 <= n <= FIB_LIMIT:
        raise ValueError(f"n must be between 0 and {FIB_LIMIT}, got {n}")
    zeros, ones = 1, 0
    for _ in range(n):
        zeros, ones = ones, zeros + ones
    return zeros, ones


def min_operations_to_one(n: int) -> int:
    """Fewest steps (divide by 3, divide by 2, subtract 1) that turn n into 1."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    steps = [0] * (n + 1)
    for i in range(2, n + 1):
        best = steps[i - 1] + 1
        if i % 2 == 0:
            best = min(best, steps[i // 2] + 1)
        if i % 3 == 0:
            best = min(best, steps[i // 3] + 1)
        steps[i] = best
    return steps[n]


def max_joy(losses: Sequence[int], joys: Sequence[int]) -> int:
    """Greatest joy collectable while health, starting at 100, stays above zero."""
    losses = list(losses)
    joys = list(joys)
    if len(losses) != len(joys):
        raise ValueError("losses and joys must have the same length")
    best = {START_HEALTH: 0}
    for loss, joy in zip(losses, joys):
        updated = dict(best)
        for health, total in best.items():
            left = health - loss
            if left > 0 and updated.get(left, total + joy - 1) < total + joy:
                updated[left] = total + joy
        best = updated
    return max(best.values())


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    items = iter(values)
    try:
        current = best = next(items)
    except StopIteration:
        raise ValueError("values must not be empty") from None
    for value in items:
        current = max(current + value, value)
        best = max(best, current)
    return best


def max_wine(amounts: Iterable[int]) -> int:
    """Most wine drinkable without taking three glasses in a row."""
    # States: last glass skipped, last run of one, last run of two.
    skipped = single = double = 0
    for amount in amounts:
        skipped, single, double = (
            max(skipped, single, double),
            skipped + amount,
            single + amount,
        )
    return max(skipped, single, double)


def max_stair_score(scores: Sequence[int]) -> int:
    """Best score climbing by one or two steps, never three stairs in a row, ending on top."""
    scores = list(scores)
    if not scores:
        raise ValueError("scores must not be empty")
    best = [0]
    for i, score in enumerate(scores, start=1):
        if i == 1:
            best.append(score)
        elif i == 2:
            best.append(best[1] + score)
        else:
            best.append(max(best[i - 2], best[i - 3] + scores[i - 2]) + score)
    return best[-1]


def card_arrangements(digits: str) -> int:
    """Number of ways to read a digit string as a row of cards numbered 1 to 34."""
    if not digits or not digits.isdigit():
        raise ValueError(f"expected a non-empty string of digits, got {digits!r}")
    length = len(digits)
    ways = [0] * (length + 1)
    ways[length] = 1
    for i in reversed(range(length)):
        if digits[i] == "0":
            continue
        ways[i] = ways[i + 1]
        if i + 1 < length and int(digits[i : i + 2]) <= MAX_CARD:
            ways[i] += ways[i + 2]
    return ways[0]


def count_sum_123(n: int) -> int:
    """Number of ordered ways to write n as a sum of 1, 2 and 3."""
    if not 1 <= n <= SUM_123_LIMIT:
        raise ValueError(f"n must be between 1 and {SUM_123_LIMIT}, got {n}")
    ways = [0, 1, 2, 4]
    while len(ways) <= n:
        ways.append(sum(ways[-3:]))
    return ways[n]


def stone_game_winner(n: int) -> str:
    """Winner of the stone game ("SK" or "CY") where taking the last stone loses."""
    if n < 1:
        raise ValueError(f"n must be positive, got {n}")
    wins = [False, False, True, False]
    for i in range(4, n + 1):
        wins.append(not (wins[i - 1] and wins[i - 3]))
    return "SK" if wins[n] else "CY"


def tile_perimeter(n: int) -> int:
    """Perimeter of the rectangle built from the first n Fibonacci squares."""
    if not 1 <= n <= TILE_LIMIT:
        raise ValueError(f"n must be between 1 and {TILE_LIMIT}, got {n}")
    previous, current = 0, 1
    for _ in range(n - 1):
        previous, current = current, previous + current
    return current * 4 + previous * 2


def max_consulting_profit(schedule: Sequence[tuple[int, int]]) -> int:
    """Greatest pay from (days, pay) jobs, one per start day, all finished in time."""
    jobs = list(schedule)
    total_days = len(jobs)
    best = [0] * (total_days + 1)
    for day in reversed(range(total_days)):
        length, pay = jobs[day]
        best[day] = best[day + 1]
        if day + length <= total_days:
            best[day] = max(best[day], pay + best[day + length])
    return best[0]