import io

import pytest

from hitori.cli import Session, main, parse_cell
from hitori.game import CellState, Game, Move


def _abcd_game():
    game = Game(2, 2)
    game.board = [["a", "b"], ["c", "d"]]
    return game


@pytest.fixture
def session():
    return Session(_abcd_game(), [], io.StringIO())


def test_parse_cell_with_space():
    assert parse_cell("b 2") == ("b", 2)


def test_parse_cell_compact_and_leading_space():
    assert parse_cell(" a1") == ("a", 1)


@pytest.mark.parametrize("text", ["", "x", "   ", "b z"])
def test_parse_cell_rejects_bad_input(text):
    with pytest.raises(ValueError):
        parse_cell(text)


def test_crossout_then_restore(session):
    session.execute("r b 2\n")
    assert session.game.state[1][1] is CellState.CROSSED
    assert session.history == [Move("r", "b", 2, "d", CellState.NORMAL)]
    session.execute("d\n")
    assert session.game.state[1][1] is CellState.NORMAL
    assert session.game.board[1][1] == "d"
    assert session.history == []


def test_paint_records_move(session):
    session.execute("b a 1\n")
    assert session.game.board[0][0] == "A"
    assert session.history == [Move("b", "a", 1, "a", CellState.NORMAL)]
    assert "Pinta na coluna a, linha 1" in session.out.getvalue()


def test_out_of_bounds_move_is_ignored(session):
    session.execute("b z 9\n")
    assert session.history == []
    assert session.game.board == [["a", "b"], ["c", "d"]]


def test_invalid_paint_arguments(session):
    session.execute("b x\n")
    assert "Argumentos inválidos para paint." in session.out.getvalue()


def test_invalid_crossout_arguments(session):
    session.execute("r ?\n")
    assert "Argumentos inválidos para crossout." in session.out.getvalue()


def test_command_requires_arguments(session):
    session.execute("b\n")
    assert "O comando 'b' requer argumentos." in session.out.getvalue()


def test_unknown_command(session):
    session.execute("x\n")
    assert "Comando 'x' não reconhecido." in session.out.getvalue()


def test_quit_returns_false(session):
    assert session.execute("s\n") is False
    assert session.out.getvalue() == ""


def test_execute_renders_board(session):
    assert session.execute("v\n") is True
    assert session.out.getvalue().endswith(session.game.render())


def test_undo_with_empty_history(session):
    session.execute("d\n")
    assert "Erro: sem movimentos para desfazer." in session.out.getvalue()


def test_save_and_load_round_trip(session, tmp_path):
    target = tmp_path / "board.txt"
    session.execute(f"g {target}\n")
    assert target.read_text(encoding="utf-8") == "2 2\nab\ncd\n"

    other = Session(Game(2, 2), [], io.StringIO())
    other.execute(f"l {target}\n")
    assert other.game.board == [["a", "b"], ["c", "d"]]
    assert "Jogo carregado com sucesso." in other.out.getvalue()


def test_load_missing_file(session, tmp_path):
    session.execute(f"l {tmp_path / 'missing.txt'}\n")
    assert "Erro ao abrir ficheiro para leitura" in session.out.getvalue()
    assert session.game.board == [["a", "b"], ["c", "d"]]


def test_verify_after_moves(session):
    session.execute("r b 2\n")
    session.execute("v\n")
    assert "O estado do jogo é válido." not in session.out.getvalue()
    for command in ("b a 1\n", "b b 1\n", "b a 2\n"):
        session.execute(command)
    session.execute("v\n")
    assert "O estado do jogo é válido." in session.out.getvalue()


def test_help_without_changes(session):
    session.execute("a\n")
    assert "Nenhuma alteração foi feita pelo comando help." in session.out.getvalue()


def test_messages_are_flushed(session):
    session.execute("r a 1\n")
    assert session.game.messages == []


def test_main_runs_until_quit(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("r a 1\ns\n"))
    assert main([]) == 0
    output = capsys.readouterr().out
    assert output.startswith("# # \n# # \n> ")
    assert "Riscada na coluna a, linha 1" in output


def test_main_stops_at_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("> ")