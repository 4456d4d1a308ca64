# aocdays

Solvers for days 1 to 24 of a twenty-five day programming puzzle calendar.
Every day is a module of its own (`aocdays.day01` to `aocdays.day24`) with
small, testable functions and a command that runs the day on a puzzle input
file. Progress and answers are reported through the `logging` module at INFO
level; a few days also print to standard output.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each day has a command that takes the path of an input file:

```
aoc-day01 input.txt
aoc-day02 input.txt
...
aoc-day24 input.txt
```

Some days take extra arguments:

```
aoc-day11 input.txt 75                 # number of blinks
aoc-day18 input.txt 71                 # width and height of the memory grid
aoc-day14 input.txt --max-seconds 500  # seconds to simulate (default 100000)
aoc-day24 input.txt --graph out.dot    # where to write the circuit (default graph.dot)
```

`aoc-lines input.txt` reads a file and logs its numbered lines, which is
handy for checking that an input was saved correctly.

## Using the library

The functions behind the commands can be called directly:

```python
from aocdays.day01 import parse_locations, similarity_score
from aocdays.day11 import count_stones
from aocdays.day22 import evolve

left, right = parse_locations(["3 4", "4 3", "2 5"])
print(similarity_score(left, right))

print(count_stones("125 17", 25))
print(evolve(123))
```

Input files are read with `aocdays.data.Data`:

```python
from aocdays.data import Data

lines = Data("input.txt").read_lines()
```

## What is not included

There is no solver and no command for the twenty-fifth day's puzzle (fitting
key schematics into lock schematics); the package covers days 1 to 24 only.