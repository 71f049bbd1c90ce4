"""Reactor reports: levels that steadily rise or fall by one to three."""

import re
from collections.abc import Iterable, Sequence
from itertools import pairwise

_LEVEL = re.compile(r"\+?[0-9]+")
_MAX_LEVEL = 2**32 - 1


def _parse_level(field: str) -> int:
    if not _LEVEL.fullmatch(field):
        raise ValueError(f"invalid level {field!r}")
    value = int(field)
    if value > _MAX_LEVEL:
        raise ValueError(f"level {field!r} out of range")
    return value


def parse_reports(text: str) -> list[list[int]]:
    """Parse one report per line, each a whitespace separated list of levels."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [[_parse_level(field) for field in line.split()] for line in lines]


def is_safe(report: Sequence[int], ascending: bool) -> bool:
    """Return True if every step moves in the given direction by one to three."""
    for previous, current in pairwise(report):
        step = current - previous if ascending else previous - current
        if not 0 < step <= 3:
            return False
    return True


def count_safe(reports: Iterable[Sequence[int]]) -> int:
    """Count safe ascending reports plus safe descending reports.

    A report with fewer than two levels is safe both ways and counts twice.
    """
    reports = list(reports)
    ascending = sum(1 for report in reports if is_safe(report, True))
    descending = sum(1 for report in reports if is_safe(report, False))
    return ascending + descending


def _fixable(report: Sequence[int], ascending: bool) -> bool:
    if is_safe(report, ascending):
        return True
    return any(
        is_safe([*report[:skip], *report[skip + 1:]], ascending)
        for skip in range(len(report))
    )


def count_safe_with_dampener(reports: Iterable[Sequence[int]]) -> int:
    """Count reports that are safe, or become safe by removing one level."""
    return sum(
        1 for report in reports if _fixable(report, True) or _fixable(report, False)
    )