# coursekit

coursekit collects small command-line tools and library modules built
around classic data-structure exercises. It uses only the Python
standard library and needs Python 3.10 or later.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command-line tools

### Character grid editing: `coursekit-image`

This tool reads a grid of characters, changes it and writes the result to
a file.

```
coursekit-image input.txt output.txt replace X O   # every X becomes O
coursekit-image input.txt output.txt dilation X    # X spreads to its 4 neighbours
coursekit-image input.txt output.txt erosion X .   # "." spreads to its 4 neighbours
```

The last line of the input sets the width of the image. Longer lines are
cut to that width. A line shorter than the last one is an error. An
unknown operation writes the image out unchanged.

From Python, use `coursekit.imaging.replace`, `dilate`, `erode` and
`transform`.

### Course schedules: `coursekit-schedule`

The input file holds course records as whitespace-separated fields: CRN,
department, course code, title, day letters (`MTWRF`), start time, end
time and room. Times look like `10:00AM`. A record with several day
letters becomes one meeting per day.

```
coursekit-schedule courses.txt out.txt room          # every room, alphabetically
coursekit-schedule courses.txt out.txt room DCC_308  # one room
coursekit-schedule courses.txt out.txt dept CSCI     # one department
coursekit-schedule courses.txt out.txt custom        # per-department statistics
```

If the input holds no courses, the output reads `No data available.`.

From Python, `coursekit.schedule.parse_courses` and `build_report` produce
the same text. `format_department`, `format_room`, `format_all_rooms` and
`format_custom` produce the individual reports. The `coursekit.course`
module provides `Course`, `Weekday`, `to_24_hour` and the sort keys
`room_key` and `department_key`.

### Kitchen simulator: `coursekit-kitchen`

The simulator reads commands from a file named on the command line, or
from standard input when no file is given:

```
add_order 1 10 2 burger fries
add_item 3 burger
add_item 2 fries
print_orders_by_time
print_orders_by_id
print_kitchen_is_cooking
print_kitchen_has_completed
run_for_time 5
run_until_next
```

Run it as follows:

```
coursekit-kitchen commands.txt
coursekit-kitchen < commands.txt
```

From Python, `coursekit.kitchen.Kitchen` runs the same simulation, and
each of its methods returns the lines it reports. `run_script` returns the
full transcript for a block of commands. `can_fill_order` tells whether
the finished items can fill an order.

### Star battle solver: `coursekit-starbattle`

```
coursekit-starbattle puzzle.txt out.txt 1 print all_solutions
coursekit-starbattle puzzle.txt out.txt 2 count one_solution
```

The arguments are, in order:

1. the puzzle file
2. the output file
3. the number of stars for each row, column and zone
4. the output mode
5. the solution mode

With the output mode `print`, every solution grid is written out, with
stars shown as `@`. With any other output mode, only the number of
solutions is written. The solution mode is `all_solutions` or
`one_solution`. Any other solution mode writes an empty file.

The puzzle file starts with the number of rows and the number of columns.
Each zone follows, given as a letter, a cell count and that many `x y`
pairs.

From Python, use `coursekit.star_battle.parse_puzzle`, `find_solutions`,
`first_solution`, `format_solutions` and `can_place`. Grids and zones are
`coursekit.star_grid.Grid` and `Zone`.

### Word frequency: `coursekit-wordfreq`

This tool reads a command script from a file named on the command line,
or from standard input:

```
load sample.txt 2 ignore_punctuation
print "the"
generate "the" 5 most_common
generate "the" 5 random
quit
```

Run it as follows:

```
coursekit-wordfreq script.txt
coursekit-wordfreq < script.txt
```

The window can be 2 or 3. With a window of 3, `print` and `generate` also
accept a two-word phrase in quotes. With the parse method
`parsing_of_punctuation`, `load` only echoes the file's tokens and counts
nothing.

From Python, `coursekit.wordfreq.WordModel` offers `load`,
`phrase_report`, `most_common` and `random_phrase`. `run_session` runs a
whole script. `tokenize` and `quoted_words` split text the way the
commands do.

## Connect four

The connect-four board is a library class only:

```python
from coursekit.connect_four import Board

board = Board("R", "Y", ".")
result = board.insert(0, True)   # None until a token has four in a line
print(board)
```

A new board has 5 rows and 4 columns. It grows when a token is dropped
into a column beyond the right edge, or when a column is stacked higher
than the current height. `tokens_in_column` and `tokens_in_row` raise
`IndexError` outside the board. The board also has `rows`, `columns`,
`winner`, `clear` and `copy`.

## What is not included

The package has no generator for random test input. It also has no
timing drills that compare lists, search trees, heaps and hash tables on
sorting, de-duplication, mode and similar operations.