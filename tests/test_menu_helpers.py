# tests/test_menu_helpers.py

import pytest

import cli.menu_helpers as helpers
from cli.menu_helpers import MenuSignal
from core.response import ErrorCode, Response


def _first():
    return "first"


def _second():
    return "second"


OPTIONS = [("First", _first), ("Second", _second)]


def test_display_menu_returns_action(feed_input):
    feed_input("2")

    assert helpers.display_menu("Menu", OPTIONS) is _second


def test_display_menu_zero_exits(feed_input):
    feed_input("0")

    assert helpers.display_menu("Menu", OPTIONS) is MenuSignal.EXIT


def test_display_menu_retries_invalid_choices(feed_input, capsys):
    feed_input("abc", "9", "-1", "1")

    assert helpers.display_menu("Menu", OPTIONS) is _first

    out = capsys.readouterr().out
    assert "Enter a valid number." in out
    assert out.count("Invalid selection. Please try again.") == 2


def test_prompt_int_input(feed_input):
    feed_input(" 42 ")

    assert helpers.prompt_int_input("Roll No:") == 42


@pytest.mark.parametrize("answer", ["", "abc", "4.5"])
def test_prompt_int_input_rejects_non_integers(feed_input, answer):
    feed_input(answer)

    with pytest.raises(ValueError, match="Invalid integer input"):
        helpers.prompt_int_input("Roll No:")


def test_prompt_text_input_rejects_empty(feed_input):
    feed_input("   ")

    with pytest.raises(ValueError, match="Email cannot be empty"):
        helpers.prompt_text_input("Email:", "Email")


def test_prompt_marks_input(feed_input):
    feed_input("77.5")

    assert helpers.prompt_marks_input("Marks:") == 77.5


def test_prompt_marks_input_rejects_non_numbers(feed_input):
    feed_input("lots")

    with pytest.raises(ValueError, match="Invalid decimal input"):
        helpers.prompt_marks_input("Marks:")


def test_prompt_marks_input_rejects_out_of_range(feed_input):
    feed_input("101")

    with pytest.raises(ValueError, match="Marks must be 0-100"):
        helpers.prompt_marks_input("Marks:")


def test_display_response_failure(capsys):
    helpers.display_response_failure(
        Response.fail(detail="Roll no 5 not found.", error=ErrorCode.NOT_FOUND)
    )

    assert "[ERROR: NOT_FOUND] Roll no 5 not found." in capsys.readouterr().out


def test_display_response_failure_ignores_success(capsys):
    helpers.display_response_failure(Response.succeed())

    assert capsys.readouterr().out == ""
