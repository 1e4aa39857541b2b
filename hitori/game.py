"""Hitori board state, move history records and the solving helpers."""

from __future__ import annotations

import enum
from collections import deque
from dataclasses import dataclass
from itertools import product
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Tuple

CROSSED_MARK = "#"
_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


class CellState(enum.Enum):
    """State of a single cell on the board."""

    NORMAL = 0
    WHITE = 1
    CROSSED = 2


@dataclass(frozen=True)
class Move:
    """A recorded move: what kind it was, where, and what the cell held before."""

    kind: str
    column: str
    row: int
    old_value: str
    old_state: CellState


class GameError(Exception):
    """Raised when an operation cannot be carried out on the board."""


def _column_letter(index: int) -> str:
    return chr(ord("a") + index)


def _state_for(char: str) -> CellState:
    if char == CROSSED_MARK:
        return CellState.CROSSED
    if char.isupper():
        return CellState.WHITE
    return CellState.NORMAL


class Game:
    """A Hitori board: its symbols, the state of each cell and pending messages."""

    def __init__(self, rows, columns):
        if rows < 0 or columns < 0:
            raise GameError("Dimensões inválidas.")
        self.rows = rows
        self.columns = columns
        self.board: List[List[str]] = [[CROSSED_MARK] * columns for _ in range(rows)]
        self.state: List[List[CellState]] = [
            [CellState.NORMAL] * columns for _ in range(rows)
        ]
        self.messages: List[str] = []

    # -- helpers -----------------------------------------------------------

    def _say(self, message: str) -> None:
        self.messages.append(message)

    def _cells(self) -> Iterator[Tuple[int, int]]:
        return product(range(self.rows), range(self.columns))

    def _neighbors(self, row: int, col: int) -> Iterator[Tuple[int, int]]:
        for dr, dc in _DIRECTIONS:
            nr, nc = row + dr, col + dc
            if 0 <= nr < self.rows and 0 <= nc < self.columns:
                yield nr, nc

    def _locate(self, column: str, row: int) -> Optional[Tuple[int, int]]:
        if not isinstance(column, str) or len(column) != 1:
            return None
        col = ord(column) - ord("a")
        if 0 < row <= self.rows and 0 <= col < self.columns:
            return row - 1, col
        return None

    def _cell(self, column: str, row: int) -> Tuple[int, int]:
        position = self._locate(column, row)
        if position is None:
            raise GameError("Coordenadas inválidas!")
        return position

    def _set_board(self, columns: int, lines: Sequence[str]) -> None:
        self.rows = len(lines)
        self.columns = columns
        self.board = [list(line) for line in lines]
        self.state = [[_state_for(char) for char in line] for line in lines]

    # -- presentation and persistence --------------------------------------

    def render(self):
        """Return the board as text, one line per row, each cell followed by a space."""
        return "".join(
            "".join(f"{char} " for char in line) + "\n" for line in self.board
        )

    def save(self, path):
        """Write the dimensions and the rows of the board to ``path``."""
        with open(path, "w", encoding="utf-8") as handle:
            handle.write(f"{self.rows} {self.columns}\n")
            for line in self.board:
                handle.write("".join(line) + "\n")
        self._say(f'Jogo salvo com sucesso no ficheiro "{path}".')

    def load(self, path):
        """Replace the board with the one stored in ``path``."""
        tokens = Path(path).read_text(encoding="utf-8").split()
        try:
            rows, columns = int(tokens[0]), int(tokens[1])
        except (IndexError, ValueError):
            raise GameError("Erro ao ler dimensões do ficheiro.") from None
        if rows < 0 or columns < 0:
            raise GameError("Erro ao ler dimensões do ficheiro.")
        lines = tokens[2 : 2 + rows]
        if len(lines) < rows:
            raise GameError(f"Erro ao ler linha {len(lines)} do ficheiro.")
        for index, line in enumerate(lines):
            if len(line) != columns:
                raise GameError(f"Erro ao ler linha {index} do ficheiro.")
        self._set_board(columns, lines)
        self._say("Jogo carregado com sucesso.")

    # -- moves -------------------------------------------------------------

    def paint(self, column, row, history):
        """Paint a cell white; a crossed cell is restored from ``history`` if possible."""
        r, c = self._cell(column, row)
        current = self.board[r][c]
        if current == CROSSED_MARK:
            match = next(
                (m for m in history or () if m.column == column and m.row == row),
                None,
            )
            if match is not None:
                self.board[r][c] = match.old_value.upper()
                self.state[r][c] = CellState.WHITE
            return
        if current.islower():
            self.board[r][c] = current.upper()
            self.state[r][c] = CellState.WHITE
        self._say(f"Pinta na coluna {column}, linha {row}")

    def crossout(self, column, row):
        """Cross out a cell."""
        r, c = self._cell(column, row)
        self._say(f"Riscada na coluna {column}, linha {row}")
        self.board[r][c] = CROSSED_MARK
        self.state[r][c] = CellState.CROSSED

    def restore(self, history):
        """Undo the last move in ``history`` and remove it from the list."""
        if not history:
            raise GameError("Erro: sem movimentos para desfazer.")
        move = history[-1]
        position = self._locate(move.column, move.row)
        if position is None:
            raise GameError("Erro: índices fora dos limites.")
        r, c = position
        self.board[r][c] = move.old_value
        self.state[r][c] = move.old_state
        history.pop()

    # -- rules -------------------------------------------------------------

    def is_unique_in_row(self, row, col, symbol):
        """Whether the lower-case ``symbol`` appears nowhere else in the row (from column 1)."""
        target = symbol.lower()
        return not any(
            char == target and j != col
            for j, char in enumerate(self.board[row][1:], start=1)
        )

    def is_unique_in_column(self, row, col, symbol):
        """Whether the lower-case ``symbol`` appears nowhere else in the column (from row 1)."""
        target = symbol.lower()
        return not any(
            line[col] == target and i != row
            for i, line in enumerate(self.board[1:], start=1)
        )

    def _crossed_neighbors_white(self, row: int, col: int) -> bool:
        for nr, nc in self._neighbors(row, col):
            neighbor = self.state[nr][nc]
            if neighbor is not CellState.WHITE:
                if neighbor is CellState.CROSSED:
                    self._say(
                        "Warning: Pelo menos Casa riscada tem vizinho(s) riscado(s)."
                    )
                else:
                    self._say(
                        "Warning: Pelo menos Casa riscada tem vizinho(s) nao branco(s)."
                    )
                return False
        return True

    def _reachable_count(self) -> int:
        start = next(
            (cell for cell in self._cells()
             if self.state[cell[0]][cell[1]] is not CellState.CROSSED),
            None,
        )
        if start is None:
            return 0
        visited = {start}
        queue = deque([start])
        while queue:
            current = queue.popleft()
            for neighbor in self._neighbors(*current):
                nr, nc = neighbor
                if neighbor not in visited and self.state[nr][nc] is not CellState.CROSSED:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return len(visited)

    def all_white_connected(self):
        """Whether every crossed cell has only white neighbours and the rest is connected."""
        total = 0
        for r, c in self._cells():
            if self.state[r][c] is CellState.CROSSED:
                if not self._crossed_neighbors_white(r, c):
                    return False
            else:
                total += 1
        return self._reachable_count() == total

    def verify(self):
        """Check the board against the rules, recording a warning for each problem."""
        valid = True
        for r, c in self._cells():
            if self.state[r][c] is CellState.WHITE:
                symbol = self.board[r][c]
                if not self.is_unique_in_row(r, c, symbol) or not self.is_unique_in_column(
                    r, c, symbol
                ):
                    self._say(
                        "Warning: Pelo menos um símbolo não é único na sua linha ou coluna."
                    )
                    valid = False
        if not self.all_white_connected():
            self._say("Warning: As casas brancas não estão conectadas ortogonalmente.")
            valid = False
        if valid:
            self._say("O estado do jogo é válido.")
        return valid

    # -- assistance --------------------------------------------------------

    def help(self, history):
        """Apply one round of deductions; return whether anything changed."""
        changed = False

        for r, c in self._cells():
            if self.state[r][c] is not CellState.WHITE:
                continue
            symbol = self.board[r][c]
            target = symbol.lower()
            if not self.is_unique_in_column(r, c, symbol):
                for k in range(self.rows):
                    if self.board[k][c] == target:
                        self.crossout(_column_letter(c), k + 1)
                        changed = True
            if not self.is_unique_in_row(r, c, symbol):
                for k in range(self.columns):
                    if self.board[r][k] == target:
                        self.crossout(_column_letter(k), r + 1)
                        changed = True

        for r, c in self._cells():
            if self.state[r][c] is not CellState.CROSSED:
                continue
            for nr, nc in self._neighbors(r, c):
                if self.state[nr][nc] is CellState.NORMAL:
                    self.paint(_column_letter(nc), nr + 1, history)
                    changed = True

        for r, c in self._cells():
            if self.state[r][c] is CellState.NORMAL and not self.all_white_connected():
                self.paint(_column_letter(c), r + 1, history)
                changed = True

        if not changed:
            self._say("Nenhuma alteração foi feita pelo comando help.")
        return changed

    def autohelp(self, history):
        """Repeat :meth:`help` until it makes no further change."""
        while self.help(history):
            pass

    def solve(self, history):
        """Undo every move, then try crossing out each cell in turn until the board verifies."""
        while history:
            self.restore(history)
        columns = self.columns
        snapshot = ["".join(line) for line in self.board]
        for r, c in product(range(len(snapshot)), range(columns)):
            self._set_board(columns, snapshot)
            self.crossout(_column_letter(c), r + 1)
            self.autohelp(history)
            if self.verify():
                self._say("O jogo foi resolvido com sucesso!")
                return True
        self._say("O jogo não pôde ser resolvido.")
        return False