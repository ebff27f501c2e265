# cli/menus/students_menu.py

"""
Student actions for the Student Records CLI.

This module defines the menu actions for managing `Student` records:
- Adding a new student, or a sample student for a quick demo
- Displaying every student
- Searching for a student by roll number
- Updating a student by replacing the whole record
- Deleting a student

Input is collected and validated here before anything reaches the registry, so the
registry only has to check for missing records, duplicates, and existence.
All operations are routed through the `StudentRegistry` and report back via `Response`.
"""

import cli.menu_helpers as helpers
import cli.model_formatters as model_formatters
import core.formatters as formatters
from models.student import Student
from models.student_registry import StudentRegistry

SAMPLE_STUDENT = {
    "roll_no": 102,
    "name": "Karan",
    "email": "karan@mail.com",
    "course": "BCA",
    "marks": 77.5,
}


# === add student ===


def add_student(registry: StudentRegistry) -> None:
    """
    Prompts for a new `Student` and adds it to the registry.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.

    Notes:
        - Any invalid field aborts the addition with an input error; nothing is sent to the registry.
    """
    try:
        roll_no = helpers.prompt_int_input("Enter Roll No (Integer):")
        student = prompt_student_fields(roll_no)

    except ValueError as e:
        helpers.display_input_error(e)
        return

    registry_response = registry.add_student(student)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print(registry_response.detail)


def add_sample_student(registry: StudentRegistry) -> None:
    """
    Adds a fixed sample `Student` and displays it.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
    """
    student = Student.from_dict(SAMPLE_STUDENT)

    registry_response = registry.add_student(student)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print(registry_response.detail)
    print(model_formatters.format_student_multiline(student))


def prompt_student_fields(roll_no: int, prefix: str = "") -> Student:
    """
    Prompts for the text fields and marks of a `Student` and constructs it.

    Args:
        roll_no (int): The roll number for the new record.
        prefix (str): Optional word inserted into each prompt (e.g. "New").

    Returns:
        A new `Student` with its grade derived from the entered marks.

    Raises:
        ValueError: If any field is empty or the marks are not a number between 0 and 100.
    """
    label = f"{prefix} " if prefix else ""

    name = helpers.prompt_text_input(f"Enter {label}Name:", "Name")
    email = helpers.prompt_text_input(f"Enter {label}Email:", "Email")
    course = helpers.prompt_text_input(f"Enter {label}Course:", "Course")
    marks = helpers.prompt_marks_input(f"Enter {label}Marks (0-100):")

    return Student(roll_no, name, email, course, marks)


# === view students ===


def view_all_students(registry: StudentRegistry) -> None:
    """
    Displays every `Student` in the registry, ordered by roll number.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
    """
    banner = formatters.format_banner_text("All Students")
    print(f"\n{banner}")

    registry_response = registry.list_all()

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    all_students = registry_response.data["records"]

    if not all_students:
        print("No records.")
        return

    helpers.display_results(
        all_students, formatter=model_formatters.format_student_multiline
    )


# === search student ===


def search_student(registry: StudentRegistry) -> None:
    """
    Prompts for a roll number and displays the matching `Student`.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
    """
    try:
        roll_no = helpers.prompt_int_input("Enter Roll No to search:")

    except ValueError as e:
        helpers.display_input_error(e)
        return

    registry_response = registry.search_student(roll_no)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print(model_formatters.format_student_found(registry_response.data["record"]))


# === update student ===


def update_student(registry: StudentRegistry) -> None:
    """
    Prompts for a roll number, shows the current record, and replaces it with newly entered fields.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.

    Notes:
        - The existing record is looked up first so the user can see what is being replaced.
        - The replacement is a new `Student`, so its grade is derived from the new marks.
    """
    try:
        roll_no = helpers.prompt_int_input("Enter Roll No to update:")

    except ValueError as e:
        helpers.display_input_error(e)
        return

    search_response = registry.search_student(roll_no)

    if not search_response.success:
        helpers.display_response_failure(search_response)
        return

    print(model_formatters.format_student_existing(search_response.data["record"]))

    try:
        updated = prompt_student_fields(roll_no, "New")

    except ValueError as e:
        helpers.display_input_error(e)
        return

    registry_response = registry.update_student(roll_no, updated)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print(registry_response.detail)


# === delete student ===


def delete_student(registry: StudentRegistry) -> None:
    """
    Prompts for a roll number and removes the matching `Student`.

    Args:
        registry (StudentRegistry): The active `StudentRegistry`.
    """
    try:
        roll_no = helpers.prompt_int_input("Enter Roll No to delete:")

    except ValueError as e:
        helpers.display_input_error(e)
        return

    registry_response = registry.delete_student(roll_no)

    if not registry_response.success:
        helpers.display_response_failure(registry_response)
        return

    print(registry_response.detail)
