# adventsolver

Solutions to 2023 Advent of Code puzzles (days 1 to 3, 5 to 16, and 18),
together with a few small helpers for reading puzzle input.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command line

Every solved day has its own command. Each one reads a puzzle input file
(by default `input.txt` in the current directory, or the path given as the
only argument) and prints the answers to both parts:

```
aoc-day01
aoc-day07 my-input.txt
aoc-day18
```

The commands are `aoc-day01` to `aoc-day03`, `aoc-day05` to `aoc-day16`,
and `aoc-day18`. If the input file cannot be read, the command prints an
error and exits with status 1.

## As a library

Every day module exposes `puzzle1` and `puzzle2`, which take the puzzle
input as a list of lines (day 15 takes the whole input as one string):

```python
from adventsolver import day01, day15
from adventsolver.inputs import read_lines

print(day01.puzzle1(["1abc2", "pqr3stu8vwx", "a1b2c3d4e5f", "treb7uchet"]))  # 142
print(day15.puzzle1("HASH"))  # 52

lines = read_lines("input.txt")
print(day01.puzzle2(lines))
```

Some days also expose their building blocks, for example
`day01.digit_value`, `day06.count_ways`, `day07.combination1` /
`day07.combination2`, `day09.extrapolate`, `day10.find_start`,
`day11.puzzle(lines, expansion)`, `day12.count_arrangements`,
`day13.find_horizontal_mirror` / `day13.find_vertical_mirror`,
`day14.roll_north` / `day14.one_cycle` / `day14.load`, `day15.hash_step`
and `day16.energized_count`.

`adventsolver.template` is a starting point for a new day: its `puzzle1`
sums the lengths of all lines.

### Helpers

- `adventsolver.inputs`: `read_text`, `read_lines` and `read_ints` read a
  file; `text_from`, `lines_from` and `ints_from` do the same for an open
  text stream.
- `adventsolver.parsing.split_ints(text, delimiter)`: split a string and
  parse every space-trimmed part as an integer, raising `ValueError` on a
  bad part.
- `adventsolver.mathutil.minimum(values)`: the smallest value, raising
  `ValueError` on an empty input.
- `adventsolver.stack.Stack`: a simple LIFO stack with `push`, `pop`,
  `peek`, `is_empty` and `move_one_to`; `pop`, `peek` and `move_one_to`
  raise `IndexError` on an empty stack.

## What is not included

There is no solver and no command for day 4, nor for day 17 or any day
after 18.