"""Tests for console command parsing and validation."""

import pytest

from commands import (
    MENU,
    InvalidCommand,
    InvalidReflectionAxis,
    MalformedParameters,
    build_spec,
    parse_choice,
    parse_numbers,
    print_menu,
    read_command,
)
from states import Axis, Command
from transform2d import Reflect, Rotate, Scale, Shear, Translate


def scripted(*answers):
    """Fake input() returning the given answers in order."""
    it = iter(answers)
    return lambda prompt="": next(it)


class TestParseChoice:
    @pytest.mark.parametrize(
        "text, command",
        [
            ("1", Command.TRANSLATE),
            ("2", Command.SCALE),
            ("3", Command.ROTATE),
            ("4", Command.REFLECT),
            ("5", Command.SHEAR),
            ("r", Command.RESET),
            ("R", Command.RESET),
            (" q \n", Command.QUIT),
            ("Q", Command.QUIT),
        ],
    )
    def test_valid_choices(self, text, command):
        assert parse_choice(text) == command

    @pytest.mark.parametrize("text", ["", "0", "6", "x", "12", "translate"])
    def test_invalid_choices(self, text):
        with pytest.raises(InvalidCommand):
            parse_choice(text)


class TestParseNumbers:
    def test_parses_floats(self):
        assert parse_numbers("50 -12.5", 2) == [50.0, -12.5]

    @pytest.mark.parametrize("text", ["", "1", "1 2 3"])
    def test_wrong_count(self, text):
        with pytest.raises(MalformedParameters):
            parse_numbers(text, 2)

    @pytest.mark.parametrize("text", ["a 1", "1 nan", "inf 2"])
    def test_non_numeric(self, text):
        with pytest.raises(MalformedParameters):
            parse_numbers(text, 2)


class TestBuildSpec:
    def test_each_kind(self):
        assert build_spec(Command.TRANSLATE, "50 0") == Translate(50.0, 0.0)
        assert build_spec(Command.SCALE, "2 2") == Scale(2.0, 2.0)
        assert build_spec(Command.ROTATE, "90") == Rotate(90.0)
        assert build_spec(Command.REFLECT, "1") == Reflect(Axis.X)
        assert build_spec(Command.REFLECT, "2") == Reflect(Axis.Y)
        assert build_spec(Command.SHEAR, "0.5 0") == Shear(0.5, 0.0)

    @pytest.mark.parametrize("text", ["0", "3", "-1", "x", "", "1 2"])
    def test_bad_reflection_axis(self, text):
        with pytest.raises(InvalidReflectionAxis):
            build_spec(Command.REFLECT, text)

    def test_bad_axis_is_an_invalid_command(self):
        with pytest.raises(InvalidCommand):
            build_spec(Command.REFLECT, "7")

    def test_reset_takes_no_parameters(self):
        with pytest.raises(InvalidCommand):
            build_spec(Command.RESET, "")


class TestReadCommand:
    def test_transform_command(self):
        out = []
        command, spec = read_command(read=scripted("3", "45"), write=out.append)
        assert command == Command.ROTATE
        assert spec == Rotate(45.0)
        assert out == ["Action: Rotation"]

    @pytest.mark.parametrize("choice, command", [("r", Command.RESET), ("q", Command.QUIT)])
    def test_commands_without_parameters(self, choice, command):
        assert read_command(read=scripted(choice), write=lambda s: None) == (command, None)

    def test_invalid_choice_does_not_prompt_for_parameters(self):
        answers = scripted("9")
        with pytest.raises(InvalidCommand):
            read_command(read=answers, write=lambda s: None)

    def test_malformed_parameters(self):
        with pytest.raises(MalformedParameters):
            read_command(read=scripted("1", "ten 5"), write=lambda s: None)

    def test_parameters_on_the_choice_line(self):
        asked = []

        def read(prompt=""):
            asked.append(prompt)
            return "1 50 0"

        command, spec = read_command(read=read, write=lambda s: None)
        assert command == Command.TRANSLATE
        assert spec == Translate(50.0, 0.0)
        assert asked == ["Enter your choice: "]

    def test_axis_on_the_choice_line(self):
        _, spec = read_command(read=scripted("4\t2"), write=lambda s: None)
        assert spec == Reflect(Axis.Y)

    def test_bad_inline_parameters(self):
        with pytest.raises(MalformedParameters):
            read_command(read=scripted("5 0.5"), write=lambda s: None)

    @pytest.mark.parametrize("line", ["r 1", "q now"])
    def test_reset_and_quit_take_no_parameters(self, line):
        with pytest.raises(InvalidCommand):
            read_command(read=scripted(line), write=lambda s: None)

    def test_eof_propagates(self):
        def closed(prompt=""):
            raise EOFError
        with pytest.raises(EOFError):
            read_command(read=closed, write=lambda s: None)


def test_menu_lists_every_command():
    out = []
    print_menu(write=out.append)
    assert out == [MENU]
    for label in ("Translate", "Scale", "Rotate", "Reflect", "Shear", "Reset", "Quit"):
        assert label in MENU
