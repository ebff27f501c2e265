# cli/menu_helpers.py

"""
Helper functions for CLI menus and user interaction in the Student Records application.

This module provides utilities for:
- Displaying interactive menus and result lists
- Prompting for and validating user input
- Displaying standard system messages and error feedback

These functions are shared across all menu modules to maintain consistent behavior and reduce duplication.
"""

from enum import Enum
from typing import Any, Callable, Iterable

from core.response import Response
from models.student import Student


class MenuSignal(Enum):
    EXIT = "EXIT"


# === display methods ===


def display_menu(
    title: str,
    options: list[tuple[str, Callable[..., Any]]],
    zero_option: str = "Return",
) -> MenuSignal | Callable[..., Any]:
    """
    Displays a numbered CLI menu and returns the selected action.

    Args:
        title (str): The heading displayed above the menu options.
        options (list[tuple[str, Callable[..., Any]]]): A list of (label, action) pairs to present.
        zero_option (str, optional): The label for the "cancel" or "exit" option. Defaults to "Return".

    Returns:
        MenuSignal.EXIT if the user selects the zero option.
        Callable[..., Any]: The function associated with the selected menu item.

    Notes:
        - Menu selection is repeated until a valid choice is made.
        - User input is matched by menu index, not by label.
    """
    while True:
        print(f"\n{title}")

        for i, (label, _) in enumerate(options, 1):
            print(f"{i}. {label}")

        print(f"0. {zero_option}")

        choice = prompt_user_input("Select an option:")

        if choice == "0":
            return MenuSignal.EXIT

        try:
            index = int(choice) - 1

            if index < 0:
                raise IndexError(index)

            return options[index][1]

        except ValueError:
            print("Enter a valid number.")

        except IndexError:
            print("Invalid selection. Please try again.")


def display_results(
    results: Iterable[Any],
    show_index: bool = False,
    formatter: Callable[[Any], str] = lambda x: str(x),
) -> None:
    """
    Prints a list of results to the console, optionally numbered and formatted.

    Args:
        results (Iterable[Any]): A sequence of results to display.
        show_index (bool, optional): If True, prepends a numbered index to each result. Defaults to False.
        formatter (Callable[[Any], str], optional): A function to convert each result to a display string. Defaults to str().
    """
    for i, result in enumerate(results, 1):
        prefix = f"{i:>2}. " if show_index else ""
        print(f"{prefix}{formatter(result)}")


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Args:
        response (Response): The response object to inspect.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


def display_input_error(error: Exception) -> None:
    print(f"\n[ERROR] Input error: {error}")


# === prompt user input methods ===


# Prompt Helpers
#
# These functions provide a consistent way to handle user input.
#
# Conventions:
# - `prompt_user_input()` is the base function, used by all others to standardize the UI format.
# - The typed prompts raise `ValueError` with a field-specific message; callers decide whether to retry.


def prompt_user_input(prompt: str) -> str:
    return input(f"\n{prompt}\n  >> ").strip()


def prompt_text_input(prompt: str, field_name: str) -> str:
    return Student.validate_text_input(prompt_user_input(prompt), field_name)


def prompt_int_input(prompt: str) -> int:
    response = prompt_user_input(prompt)

    try:
        return int(response)

    except ValueError:
        raise ValueError(f"Invalid integer input: '{response}'.")


def prompt_marks_input(prompt: str) -> float:
    response = prompt_user_input(prompt)

    try:
        marks = float(response)

    except ValueError:
        raise ValueError(f"Invalid decimal input: '{response}'.")

    return Student.validate_marks_input(marks)
