"""Tests for per-line command errors."""

from toyrobot.domain.errors import CommandError, EmptyInputError, InvalidCommandError


class TestErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(EmptyInputError, CommandError)
        assert issubclass(InvalidCommandError, CommandError)
        assert EmptyInputError.code != InvalidCommandError.code

    def test_invalid_command_carries_token(self) -> None:
        exc = InvalidCommandError("JUMP", line="jump")
        assert exc.token == "JUMP"
        assert exc.line == "jump"
        assert str(exc) == "Invalid command: JUMP"

    def test_invalid_command_line_defaults_to_token(self) -> None:
        assert InvalidCommandError("FLY").line == "FLY"

    def test_empty_input_keeps_raw_line(self) -> None:
        exc = EmptyInputError("   ")
        assert exc.line == "   "
        assert exc.code == "EMPTY_INPUT"
