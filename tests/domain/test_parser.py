"""Tests for the command-line parser."""

import pytest

from toyrobot.domain.commands import CommandName, Keyword, Place
from toyrobot.domain.direction import Direction
from toyrobot.domain.errors import EmptyInputError
from toyrobot.domain.parser import parse
from toyrobot.domain.robot import Robot
from toyrobot.services.dispatcher import execute


class TestEmptyInput:
    @pytest.mark.parametrize("line", ["", " ", "\t", "\n", "   \r\n"])
    def test_blank_lines_raise(self, line: str) -> None:
        with pytest.raises(EmptyInputError) as excinfo:
            parse(line)
        assert excinfo.value.code == "EMPTY_INPUT"
        assert excinfo.value.message == "Command cannot be empty."


class TestPlace:
    def test_basic(self) -> None:
        assert parse("PLACE 1,2,EAST") == Place(1, 2, Direction.EAST)

    @pytest.mark.parametrize("line", ["PLACE 0,0,north", "place 0,0,NORTH", "Place 0,0,North"])
    def test_case_insensitive(self, line: str) -> None:
        assert parse(line) == Place(0, 0, Direction.NORTH)

    def test_surrounding_whitespace(self) -> None:
        assert parse("  PLACE 3,4,WEST\n") == Place(3, 4, Direction.WEST)

    def test_no_range_check_at_parse_time(self) -> None:
        assert parse("PLACE 99,7,SOUTH") == Place(99, 7, Direction.SOUTH)

    def test_leading_zeros(self) -> None:
        assert parse("PLACE 01,002,NORTH") == Place(1, 2, Direction.NORTH)

    @pytest.mark.parametrize(
        "line",
        [
            "PLACE -1,2,NORTH",
            "PLACE 1,2",
            "PLACE 1, 2, NORTH",
            "PLACE a,b,NORTH",
            "PLACE 1,2,UP",
            "PLACE 1,2,NORTH EXTRA",
            "PLACE1,2,NORTH",
        ],
    )
    def test_malformed_falls_through_to_keyword(self, line: str) -> None:
        command = parse(line)
        assert command == Keyword(line.strip().upper())
        assert command.name is None

    def test_name(self) -> None:
        assert parse("PLACE 0,0,NORTH").name is CommandName.PLACE


class TestKeywords:
    @pytest.mark.parametrize(
        ("line", "name"),
        [
            ("MOVE", CommandName.MOVE),
            ("move", CommandName.MOVE),
            ("Left", CommandName.LEFT),
            ("right", CommandName.RIGHT),
            ("REPORT\n", CommandName.REPORT),
        ],
    )
    def test_known(self, line: str, name: CommandName) -> None:
        command = parse(line)
        assert isinstance(command, Keyword)
        assert command.name is name

    def test_unknown_passes_through(self) -> None:
        command = parse("jump")
        assert command == Keyword("JUMP")
        assert command.name is None

    def test_place_without_arguments_is_not_a_keyword(self) -> None:
        assert parse("PLACE").name is None


class TestPlaceReportAgreement:
    @pytest.mark.parametrize("direction", ["NORTH", "EAST", "SOUTH", "WEST"])
    @pytest.mark.parametrize(("x", "y"), [(0, 0), (4, 4), (2, 3)])
    def test_report_reproduces_place(self, x: int, y: int, direction: str) -> None:
        robot = Robot()
        execute(robot, parse(f"PLACE {x},{y},{direction}"))
        rx, ry, rdir = robot.report().split(",")
        assert (int(rx), int(ry), rdir.upper()) == (x, y, direction)
