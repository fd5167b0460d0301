"""
Unit tests for the command line front end.
"""
import contextlib
import io

import pytest
from minesweeper import Board, BoardConfig, DEFAULT_CONFIG
from minesweeper.cli import (
    COMMAND_HELP,
    build_parser,
    main,
    parse_board_config,
    run_session,
)


# ============================================================================
# Argument Tests
# ============================================================================

class TestParseBoardConfig:
    """Test conversion of positional arguments."""

    def test_no_arguments_uses_defaults_quietly(self, capsys) -> None:
        assert parse_board_config([]) == DEFAULT_CONFIG
        assert capsys.readouterr().err == ""

    def test_valid_arguments(self) -> None:
        assert parse_board_config(["5", "6", "7"]) == BoardConfig(5, 6, 7)

    def test_wrong_argument_count(self, capsys) -> None:
        """Anything other than three values falls back with a usage line."""
        assert parse_board_config(["5", "6"]) == DEFAULT_CONFIG
        assert "Usage" in capsys.readouterr().err

    def test_non_integer_argument(self, capsys) -> None:
        assert parse_board_config(["five", "6", "7"]) == DEFAULT_CONFIG
        assert "not an integer" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "values",
        [["0", "3", "1"], ["3", "-2", "1"], ["3", "3", "-1"], ["3", "3", "9"]],
    )
    def test_out_of_range_values(self, values, capsys) -> None:
        """Invalid combinations fall back to defaults with a diagnostic."""
        assert parse_board_config(values) == DEFAULT_CONFIG
        assert "Using defaults" in capsys.readouterr().err

    def test_parser_accepts_negative_positionals(self) -> None:
        """Negative values reach the config check instead of argparse."""
        args = build_parser().parse_args(["-3", "4", "5", "--seed", "9"])
        assert args.dimensions == ["-3", "4", "5"]
        assert args.seed == 9


# ============================================================================
# Session Tests
# ============================================================================

class TestRunSession:
    """Test the command loop."""

    def test_quit_stops_reading(self, small_board: Board) -> None:
        out = io.StringIO()
        run_session(small_board, ["r 1 1", "q", "f 0 0"], out)
        assert small_board.cells_revealed == 1
        assert small_board.flags_placed == 0

    def test_bad_commands_print_help(self, small_board: Board) -> None:
        out = io.StringIO()
        run_session(small_board, ["x", "r 1", "f a b", ""], out)
        assert out.getvalue().count(COMMAND_HELP) == 4
        assert small_board.first_click_pending is True

    def test_flag_command(self, small_board: Board) -> None:
        out = io.StringIO()
        run_session(small_board, ["f 2 2"], out)
        assert small_board.get_cell(2, 2).is_flagged is True
        assert "Mines: 0" in out.getvalue()

    def test_loss_discloses_mines(self, find_mines) -> None:
        board = Board(BoardConfig(3, 3, 2), seed=4)
        board.reveal(1, 1)
        first, second = find_mines(board)
        out = io.StringIO()

        run_session(board, [f"r {first[0]} {first[1]}", "r 0 0"], out)

        assert board.is_lost is True
        assert board.get_cell(*second).is_revealed is True
        assert "Game Over!" in out.getvalue()
        assert "Game over. 'n' for a new game" in out.getvalue()

    def test_new_game_resets_board(self, small_board: Board) -> None:
        out = io.StringIO()
        run_session(small_board, ["r 1 1", "n"], out)
        assert small_board.first_click_pending is True
        assert small_board.cells_revealed == 0


# ============================================================================
# Entry Point Tests
# ============================================================================

class TestMain:
    """Test the full entry point."""

    def test_main_plays_from_stdin(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("r 0 0\nq\n"))
        assert main(["4", "4", "2", "--seed", "1"]) == 0
        out = capsys.readouterr().out
        assert "Board: 4x4 with 2 mines" in out
        assert "Mines: 2" in out

    def test_main_falls_back_to_defaults(self, monkeypatch, capsys) -> None:
        monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
        assert main(["1", "1", "1"]) == 0
        captured = capsys.readouterr()
        assert "Board: 10x10 with 15 mines" in captured.out
        assert "Using defaults" in captured.err

    def test_main_output_follows_redirected_stdout(self, monkeypatch) -> None:
        """Board rendering goes to the stdout in effect when main runs."""
        monkeypatch.setattr("sys.stdin", io.StringIO("q\n"))
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            main(["4", "4", "2", "--seed", "1"])
        out = buffer.getvalue()
        assert "Board: 4x4 with 2 mines" in out
        assert "Mines: 2  :)  Playing..." in out
