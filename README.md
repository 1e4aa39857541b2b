# hitori

A Hitori puzzle game for the terminal, with hints, undo and a simple
solver. The game's messages are in Portuguese.

In Hitori every cell holds a letter. You paint cells white or cross them
out until:

- no white letter repeats in its row or column,
- no crossed-out cell touches a cell that is not painted white,
- all cells that are not crossed out form one orthogonally connected region.

## Installing

```
pip install .
```

## Playing

Start the game:

```
hitori
```

`python -m hitori.cli` does the same. The command takes no options other
than `-h`/`--help`.

The game starts with an empty 2 × 2 board, so the first thing to do is
usually to load a puzzle with `l`. The board is printed after every
command, each cell followed by a space. Lower-case letters are untouched
cells, upper-case letters are painted white and `#` marks a crossed-out
cell. Columns are named by letters from `a`, rows are numbered from `1`,
and a cell is written as its column and row, for example `b2` or `b 2`.

| Command      | Effect                                                            |
|--------------|-------------------------------------------------------------------|
| `l FILE`     | load a puzzle from `FILE`                                          |
| `g FILE`     | save the current board to `FILE`                                   |
| `b CELL`     | paint a cell white                                                 |
| `r CELL`     | cross out a cell                                                   |
| `d`          | undo the last `b` or `r` move                                      |
| `v`          | check the board against the rules and report what is wrong         |
| `a`          | apply one round of hints                                           |
| `A`          | apply hints until a round changes nothing                          |
| `R`          | undo every move, then try to solve the puzzle                      |
| `s`          | quit (any line starting with `s`)                                  |

Painting a crossed-out cell puts its letter back, painted, if a move on
that cell is in the undo history; otherwise the cell stays crossed out.
Cells outside the board are rejected with a message.

A round of hints:

1. crosses out every other copy of a white letter in its row and column,
2. paints every untouched neighbour of a crossed-out cell,
3. paints untouched cells while the board fails the connectivity check.

Changes made by hints and by the solver are not added to the undo
history, so `d` only undoes moves typed with `b` and `r`.

The solver tries crossing out each cell in turn, applies hints until
nothing changes and stops at the first board that passes the check.

## Puzzle files

A puzzle file holds the number of rows and columns on its first line,
then one line of letters per row, each exactly as long as the number of
columns:

```
3 3
abc
bca
cab
```

Saved games use the same format, so a board can be saved half-finished
and loaded again later. Upper-case letters load as painted cells and `#`
as crossed-out cells.

## Using it from Python

```python
from hitori.game import Game, GameError

game = Game(2, 2)
game.load("puzzle.txt")
game.crossout("b", 2)
print(game.verify())
print(game.render())
print(game.messages)   # feedback collected so far
```

`hitori.game` provides:

- `Game(rows, columns)` with `render`, `save`, `load`, `paint`,
  `crossout`, `restore`, `is_unique_in_row`, `is_unique_in_column`,
  `all_white_connected`, `verify`, `help`, `autohelp` and `solve`;
  its `board`, `state` and `messages` attributes hold the letters, the
  state of each cell and the feedback messages;
- `CellState` (`NORMAL`, `WHITE`, `CROSSED`);
- `Move`, a record of one move used as the undo history (a plain list);
- `GameError`, raised for cells off the board, an empty undo history and
  malformed puzzle files.

`hitori.cli` provides `parse_cell`, which turns text such as `"b 2"` into
`("b", 2)`, and `Session`, which runs the same commands the `hitori`
command reads, one line at a time, through `Session.execute`. `execute`
returns `False` for a quit line and `True` otherwise.

## What it does not do

The package does not generate puzzles and does not ship any; they have
to be written or obtained as files in the format above. The solver is a
one-cell guess followed by hints, not a full search, so it can report
that a solvable puzzle could not be solved.

## Running the tests

```
pip install .[test]
pytest
```