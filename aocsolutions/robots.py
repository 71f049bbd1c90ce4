"""Restroom redoubt: robots moving on a wrapping grid and the safety factor."""

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from itertools import product
from math import prod

WIDTH = 101
HEIGHT = 103
SECONDS = 100

_I32 = re.compile(r"[+-]?[0-9]+")


@dataclass(frozen=True)
class Robot:
    """A robot's starting position and velocity, both as (x, y)."""

    pos: tuple[int, int]
    velocity: tuple[int, int]


def _lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def _parse_i32(value: str) -> int:
    value = value.strip()
    if not _I32.fullmatch(value):
        raise ValueError(f"invalid number {value!r}")
    number = int(value)
    if not -(2**31) <= number < 2**31:
        raise ValueError(f"number {value!r} out of range")
    return number


def _pair(field: str) -> tuple[int, int]:
    parts = field.split(",")
    if len(parts) < 2:
        raise ValueError(f"expected two numbers in {field!r}")
    return _parse_i32(parts[0][2:]), _parse_i32(parts[1])


def parse_robots(text: str) -> list[Robot]:
    """Parse lines of the form 'p=x,y v=dx,dy'."""
    robots = []
    for line in _lines(text):
        fields = line.split()
        if len(fields) < 2:
            raise ValueError(f"expected position and velocity in {line!r}")
        robots.append(Robot(_pair(fields[0]), _pair(fields[1])))
    return robots


def safety_factor(robots: Iterable[Robot]) -> int:
    """Multiply the robot counts of the four quadrants after 100 seconds.

    Robots on the middle row or column belong to no quadrant.
    """
    mid_x, mid_y = WIDTH // 2, HEIGHT // 2
    quadrants: Counter[tuple[bool, bool]] = Counter()
    for robot in robots:
        x = (robot.pos[0] + robot.velocity[0] * SECONDS) % WIDTH
        y = (robot.pos[1] + robot.velocity[1] * SECONDS) % HEIGHT
        if x == mid_x or y == mid_y:
            continue
        quadrants[(y < mid_y, x < mid_x)] += 1
    return prod(quadrants[key] for key in product((True, False), repeat=2))