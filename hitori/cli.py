"""Interactive command loop for playing Hitori in a terminal."""

from __future__ import annotations

import argparse
import re
import sys
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from hitori.game import Game, GameError, Move

_CELL_PATTERN = re.compile(r"\s*(\S)\s*([+-]?\d+)")
_COMMAND_PATTERN = re.compile(r"\s*(\S)\s*(.*)", re.DOTALL)
QUIT_LETTER = "s"


def parse_cell(text):
    """Parse a cell reference such as ``"b 2"`` into ``(column letter, row number)``."""
    match = _CELL_PATTERN.match(text or "")
    if match is None:
        raise ValueError(f"invalid cell reference: {text!r}")
    return match.group(1), int(match.group(2))


class Session:
    """Runs typed commands against a game, writing feedback and the board to ``out``."""

    def __init__(self, game=None, history=None, out=None):
        self.game: Game = game if game is not None else Game(2, 2)
        self.history: List[Move] = history if history is not None else []
        self.out: TextIO = out if out is not None else sys.stdout
        self._commands: Dict[str, Tuple[Callable[[Optional[str]], None], bool]] = {
            "b": (self._paint, True),
            "r": (self._crossout, True),
            "l": (self._load, True),
            "g": (self._save, True),
            "v": (self._verify, False),
            "a": (self._help, False),
            "A": (self._autohelp, False),
            "R": (self._solve, False),
            "d": (self._restore, False),
        }

    def _write(self, message: str) -> None:
        self.out.write(message + "\n")

    def _flush_messages(self) -> None:
        for message in self.game.messages:
            self._write(message)
        self.game.messages.clear()

    def _in_bounds(self, column: str, row: int) -> bool:
        col = ord(column) - ord("a")
        return 0 <= row - 1 < self.game.rows and 0 <= col < self.game.columns

    def _record_target(self, args: Optional[str], name: str) -> Optional[Tuple[str, int]]:
        try:
            column, row = parse_cell(args or "")
        except ValueError:
            self._write(f"Argumentos inválidos para {name}.")
            return None
        if not self._in_bounds(column, row):
            return None
        return column, row

    # -- command handlers ----------------------------------------------------

    def _paint(self, args: Optional[str]) -> None:
        target = self._record_target(args, "paint")
        if target is None:
            return
        column, row = target
        r, c = row - 1, ord(column) - ord("a")
        self.history.append(
            Move("b", column, row, self.game.board[r][c], self.game.state[r][c])
        )
        self.game.paint(column, row, self.history)

    def _crossout(self, args: Optional[str]) -> None:
        target = self._record_target(args, "crossout")
        if target is None:
            return
        column, row = target
        r, c = row - 1, ord(column) - ord("a")
        old_value, old_state = self.game.board[r][c], self.game.state[r][c]
        self.game.crossout(column, row)
        self.history.append(Move("r", column, row, old_value, old_state))

    def _load(self, args: Optional[str]) -> None:
        if not args:
            self._write("Argumentos inválidos para load. Especifica o nome do ficheiro.")
            return
        try:
            self.game.load(args)
        except OSError as error:
            self._write(f"Erro ao abrir ficheiro para leitura: {error.strerror}")

    def _save(self, args: Optional[str]) -> None:
        if not args:
            self._write("Argumentos inválidos para save. Especifica o nome do ficheiro.")
            return
        try:
            self.game.save(args)
        except OSError as error:
            self._write(f"Erro ao abrir ficheiro para escrita: {error.strerror}")

    def _verify(self, args: Optional[str]) -> None:
        self.game.verify()

    def _help(self, args: Optional[str]) -> None:
        self.game.help(self.history)

    def _autohelp(self, args: Optional[str]) -> None:
        self.game.autohelp(self.history)

    def _solve(self, args: Optional[str]) -> None:
        self.game.solve(self.history)

    def _restore(self, args: Optional[str]) -> None:
        self.game.restore(self.history)

    # -- dispatch -------------------------------------------------------------

    def execute(self, line):
        """Run one input line; return False when it asks to quit, True otherwise."""
        if line.startswith(QUIT_LETTER):
            return False
        match = _COMMAND_PATTERN.match(line)
        if match is not None:
            letter = match.group(1)
            args = match.group(2).lstrip().split("\n", 1)[0]
            self._dispatch(letter, args)
        self.out.write(self.game.render())
        return True

    def _dispatch(self, letter: str, args: str) -> None:
        entry = self._commands.get(letter)
        if entry is None:
            self._write(f"Comando '{letter}' não reconhecido.")
            return
        handler, needs_args = entry
        if needs_args and not args:
            self._write(f"O comando '{letter}' requer argumentos.")
            return
        try:
            handler(args or None)
        except GameError as error:
            self._write(str(error))
        finally:
            self._flush_messages()


def main(argv=None):
    """Play Hitori interactively on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="hitori",
        description="Jogo Hitori: b <col><lin> pinta, r <col><lin> risca, "
        "l/g <ficheiro> carrega/grava, v verifica, a ajuda, A ajuda automática, "
        "R resolve, d desfaz, s sai.",
    )
    parser.parse_args(argv)

    session = Session(Game(2, 2), [], sys.stdout)
    sys.stdout.write(session.game.render())
    while True:
        sys.stdout.write("> ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            break
        if not session.execute(line):
            break
    return 0


if __name__ == "__main__":
    sys.exit(main())