"""Small number puzzles: dice sums, bases, Fibonacci, Hanoi and friends."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

__all__ = [
    "DICE_MODULUS",
    "dice_combinations",
    "to_base",
    "fibonacci_up_to",
    "hanoi_moves",
    "multiplication_table",
    "star_diamond",
    "describe_day",
]

DICE_MODULUS = 1_000_000_007
_DIGITS = "0123456789ABCDEF"


def dice_combinations(n: int) -> int:
    """Count the ordered ways to reach the sum n with throws of a six-sided die.

    The count is taken modulo DICE_MODULUS.
    """
    if n < 0:
        raise ValueError("the target sum must not be negative")
    window: deque[int] = deque([1], maxlen=6)
    for _ in range(n):
        window.append(sum(window) % DICE_MODULUS)
    return window[-1]


def to_base(n: int, base: int) -> str:
    """Write a non-negative integer in a base from 2 to 16, upper-case digits.

    Zero has no digits and gives an empty string.
    """
    if not 2 <= base <= len(_DIGITS):
        raise ValueError(f"base must be between 2 and {len(_DIGITS)}")
    if n < 0:
        raise ValueError("the number must not be negative")
    digits: list[str] = []
    while n > 0:
        n, remainder = divmod(n, base)
        digits.append(_DIGITS[remainder])
    return "".join(reversed(digits))


def fibonacci_up_to(limit: int) -> list[int]:
    """Return 0, 1 and then every further Fibonacci term not above limit."""
    terms = [0, 1]
    previous, current = 0, 1
    following = previous + current
    while following <= limit:
        terms.append(following)
        previous, current = current, following
        following = previous + current
    return terms


def hanoi_moves(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> Iterator[tuple[str, str]]:
    """Yield the (from, to) moves that carry n discs from source to target."""
    if n < 1:
        raise ValueError("there must be at least one disc")
    return _hanoi(n, source, spare, target)


def _hanoi(n: int, source: str, spare: str, target: str) -> Iterator[tuple[str, str]]:
    if n == 1:
        yield source, target
        return
    yield from _hanoi(n - 1, source, target, spare)
    yield source, target
    yield from _hanoi(n - 1, spare, source, target)


def multiplication_table(n: int) -> list[str]:
    """Return the lines "n * i = product" for i from 1 to 10."""
    return [f"{n} * {i} = {n * i}" for i in range(1, 11)]


def star_diamond(rows: int) -> list[str]:
    """Return the lines of a diamond of stars whose widest row has rows stars."""
    if rows < 0:
        raise ValueError("the number of rows must not be negative")
    upper = [" " * (rows - i) + "* " * i for i in range(rows + 1)]
    lower = [" " * i + "* " * (rows - i) for i in range(1, rows)]
    return upper + lower


def describe_day(day: int) -> str:
    """Describe a day of the week numbered from 1; 6 and 7 are the weekend."""
    if day == 6:
        return "Today is Saturday"
    if day == 7:
        return "Today is Sunday"
    return "Looking forward to the Weekend"