# aocsolutions

Solvers for a set of Advent of Code puzzles, written as small, importable
Python modules. Each solver takes the puzzle input as text, or as the
structures its parser returns, and gives back the answer, so you can use
them from your own scripts, notebooks or tests. Malformed input raises
`ValueError`.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

The package installs one command, `aocsolutions`. It reads lines of two
whitespace-separated integers from standard input, stopping at the first
empty line or at the end of input, and prints the total distance between
the two sorted lists:

```
$ aocsolutions
Please input the numbers, press enter when done: 
3   4
4   3
2   5
1   3
3   9
3   3

total difference: 11
```

A line without two integers is reported on standard error and the command
exits with status 1.

## Library use

Each puzzle lives in its own module:

| Module | Puzzle | Main functions |
| --- | --- | --- |
| `aocsolutions.captcha` | Inverse captcha (2017 day 1) | `parse_captchas`, `sum_next_matches`, `sum_halfway_matches` |
| `aocsolutions.password` | Secure container (2019 day 4) | `is_valid`, `count_valid` |
| `aocsolutions.location_lists` | Historian hysteria (2024 day 1) | `read_lines`, `parse_pairs`, `total_difference`, `similarity_score` |
| `aocsolutions.reports` | Red-nosed reports (2024 day 2) | `parse_reports`, `count_safe`, `count_safe_with_dampener` |
| `aocsolutions.mul_scanner` | Mull it over (2024 day 3) | `scan_products`, `sum_products`, `tokenize`, `evaluate` |
| `aocsolutions.word_search` | Ceres search (2024 day 4) | `count_xmas`, `count_x_mas` |
| `aocsolutions.print_queue` | Print queue (2024 day 5) | `tokenize`, `parse`, `sum_ordered_middles`, `sum_reordered_middles` |
| `aocsolutions.guard_patrol` | Guard gallivant (2024 day 6) | `parse_map`, `count_walked`, `count_loop_positions` |
| `aocsolutions.calibration` | Bridge repair (2024 day 7) | `parse_equations`, `total_add_mul`, `total_with_concat` |
| `aocsolutions.antennas` | Resonant collinearity (2024 day 8) | `parse_map`, `count_antinodes`, `count_harmonic_antinodes` |
| `aocsolutions.disk` | Disk fragmenter (2024 day 9) | `parse_disk_map`, `files_to_disk`, `compact_blocks`, `compact_files`, `checksum` |
| `aocsolutions.trails` | Hoof it (2024 day 10) | `parse_map`, `total_score`, `total_rating` |
| `aocsolutions.stones` | Plutonian pebbles (2024 day 11) | `parse_stones`, `simulate`, `count_stones` |
| `aocsolutions.garden` | Garden groups (2024 day 12) | `parse_map`, `explore_regions`, `region_sides`, `fence_price` |
| `aocsolutions.claw` | Claw contraption (2024 day 13) | `tokenize`, `parse`, `total_search`, `total_exact` |
| `aocsolutions.robots` | Restroom redoubt (2024 day 14) | `parse_robots`, `safety_factor` |
| `aocsolutions.warehouse` | Warehouse woes (2024 day 15) | `parse_warehouse`, `simulate`, `gps_sum` |
| `aocsolutions.wide_warehouse` | Warehouse woes, widened (2024 day 15) | `parse_wide_warehouse`, `simulate`, `gps_sum` |
| `aocsolutions.maze` | Reindeer maze (2024 day 16) | `parse_maze`, `lowest_score`, `best_path_tiles` |

A few examples:

```python
from aocsolutions.captcha import parse_captchas, sum_next_matches
from aocsolutions.reports import parse_reports, count_safe
from aocsolutions.stones import parse_stones, count_stones
from aocsolutions.claw import PRIZE_OFFSET, parse, tokenize, total_exact
from aocsolutions.maze import parse_maze, lowest_score

print(sum_next_matches(parse_captchas("1122")))          # 3

reports = parse_reports("7 6 4 2 1\n1 2 7 8 9\n")
print(count_safe(reports))                                 # 1

print(count_stones(parse_stones("125 17"), 25))            # 55312

with open("claw.txt") as handle:
    machines = parse(tokenize(handle.read()), PRIZE_OFFSET)
print(total_exact(machines))

with open("maze.txt") as handle:
    print(lowest_score(parse_maze(handle.read())))
```

## What the package does not do

- Only the location-list puzzle has a command. Every other solver is used
  from Python: read the input file yourself and pass its text to the
  module's parser.
- `aocsolutions.robots` computes the safety factor after 100 seconds on a
  101 by 103 grid. It does not draw the robots' positions or search for a
  picture among them.