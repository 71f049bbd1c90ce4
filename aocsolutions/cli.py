"""Command line entry: total distance between two lists of location ids read from stdin."""

import argparse
import sys

from aocsolutions.location_lists import parse_pairs, read_lines, total_difference

PROMPT = "Please input the numbers, press enter when done: "


def main(argv: list[str] | None = None) -> int:
    """Read pairs of numbers until an empty line and print their total difference."""
    parser = argparse.ArgumentParser(
        prog="aocsolutions",
        description="Read two columns of numbers from standard input, one pair "
        "per line, ending with an empty line, and print the total difference.",
    )
    parser.parse_args(argv)

    print(PROMPT)
    lines = read_lines(sys.stdin)
    try:
        left, right = parse_pairs(lines)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"total difference: {total_difference(left, right)}")
    return 0