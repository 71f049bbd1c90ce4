"""Password candidates: non-decreasing digits with at least one adjacent pair."""

from itertools import pairwise


def is_valid(num: int) -> bool:
    """Return True if the digits never decrease and two adjacent digits are equal."""
    has_pair = False
    for first, following in pairwise(str(num)):
        if first == following:
            has_pair = True
        elif following < first:
            return False
    return has_pair


def count_valid(low: int, high: int) -> int:
    """Count valid passwords from low up to, but not including, high."""
    return sum(1 for num in range(low, high) if is_valid(num))