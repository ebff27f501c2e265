# cli/model_formatters.py

# anything that renders domain objects for the terminal
from models.student import Student

# === student formatters ===


def format_student_multiline(student: Student) -> str:
    return student.display_info()


def format_student_found(student: Student) -> str:
    return f"Student found:\n{format_student_multiline(student)}"


def format_student_existing(student: Student) -> str:
    return f"Existing record:\n{format_student_multiline(student)}"
