# cli/main.py

"""
Main Menu for the Student Records CLI.

Builds the session configuration, sets up logging, creates the `StudentRegistry`,
and dispatches menu selections to the student actions.
"""

import logging

import cli.menu_helpers as helpers
import core.formatters as formatters
from cli.menu_helpers import MenuSignal
from cli.menus import students_menu
from core.config import AppConfig
from core.logging_config import setup_logging
from models.student_registry import StudentRegistry

logger = logging.getLogger(__name__)


def run_cli(config: AppConfig | None = None) -> None:
    """
    Top-level loop with dispatch for the Main menu.

    Args:
        config (AppConfig | None): Session settings. Defaults to settings read from the environment.

    Raises:
        RuntimeError: If the menu response is unrecognized.
        SystemExit: When the user chooses to exit.
    """
    if config is None:
        config = AppConfig()

    setup_logging(config.log_level)

    registry = StudentRegistry(loader_config=config.loader)
    logger.info("session started with %s", config)

    title = formatters.format_banner_text("Menu")
    options = [
        ("Add Student", students_menu.add_student),
        ("Display All Students", students_menu.view_all_students),
        ("Search Student", students_menu.search_student),
        ("Update Student", students_menu.update_student),
        ("Delete Student", students_menu.delete_student),
        ("Demo: Add sample student (quick)", students_menu.add_sample_student),
    ]
    zero_option = "Exit"

    while True:
        menu_response = helpers.display_menu(title, options, zero_option)

        if menu_response is MenuSignal.EXIT:
            exit_program()

        elif callable(menu_response):
            menu_response(registry)

        else:
            raise RuntimeError(f"Unexpected MenuResponse received: {menu_response}")


def exit_program():
    """
    Displays an exit banner and terminates the CLI program.

    Raises:
        SystemExit: Always raised to immediately terminate execution.

    Notes:
        - All records are discarded; nothing is written to disk.
    """
    exit_banner = formatters.format_banner_text("Exiting Program")
    print(f"\n{exit_banner}")
    print("Program execution completed.\n")

    raise SystemExit
