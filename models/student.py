# models/student.py

"""
Represents a student record held by the `StudentRegistry`.

A `Student` is identified by an integer roll number and carries a name, email,
course, and marks out of 100. The letter grade is derived from the marks once, at
construction, and never recomputed.

Students are immutable: every field is exposed through a read-only property. Any
change to a record, marks included, is represented by constructing a new `Student`
so the grade always agrees with the marks.

Includes functionality for:
- Deriving a letter grade from marks
- Validating text and marks input before construction
- Rendering the record for display
- Serializing to and from JSON-compatible dictionaries
"""

from __future__ import annotations

from textwrap import dedent

import core.formatters as formatters
from models.person import Person

MIN_MARKS = 0.0
MAX_MARKS = 100.0

# (lower bound, grade), checked in order
GRADE_THRESHOLDS: list[tuple[float, str]] = [
    (90.0, "A"),
    (75.0, "B"),
    (60.0, "C"),
]
FALLBACK_GRADE = "D"


def calculate_grade(marks: float) -> str:
    for lower_bound, grade in GRADE_THRESHOLDS:
        if marks >= lower_bound:
            return grade

    return FALLBACK_GRADE


class Student(Person):

    def __init__(
        self,
        roll_no: int,
        name: str,
        email: str,
        course: str,
        marks: float,
    ):
        super().__init__(name, email)
        self._roll_no: int = roll_no
        self._course: str = course
        self._marks: float = float(marks)
        self._grade: str = calculate_grade(self._marks)

    # === properties ===

    @property
    def roll_no(self) -> int:
        return self._roll_no

    @property
    def course(self) -> str:
        return self._course

    @property
    def marks(self) -> float:
        return self._marks

    @property
    def grade(self) -> str:
        return self._grade

    # === display ===

    def display_info(self) -> str:
        return dedent(
            f"""\
            Roll No: {self._roll_no}
            Name: {self._name}
            Email: {self._email}
            Course: {self._course}
            Marks: {self._marks}
            Grade: {self._grade}
            """
        ) + formatters.format_divider()

    # === persistence and import ===

    def to_dict(self) -> dict:
        return {
            "roll_no": self._roll_no,
            "name": self._name,
            "email": self._email,
            "course": self._course,
            "marks": self._marks,
            "grade": self._grade,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Student:
        # grade is always re-derived, never trusted from input
        return cls(
            roll_no=data["roll_no"],
            name=data["name"],
            email=data["email"],
            course=data["course"],
            marks=data["marks"],
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented

        return self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash(tuple(self.to_dict().values()))

    def __repr__(self) -> str:
        return f"Student({self._roll_no}, {self._name}, {self._email}, {self._course}, {self._marks})"

    def __str__(self) -> str:
        return f"STUDENT: name: {self._name}, roll no: {self._roll_no}, grade: {self._grade}"

    # === data validators ===

    @staticmethod
    def validate_text_input(value: str, field_name: str = "Field") -> str:
        """
        Validates and normalizes a required text field.

        Args:
            value: The raw input string.
            field_name: Label used in the error message.

        Returns:
            The input with surrounding whitespace removed.

        Raises:
            ValueError: If the input is empty or whitespace only.
        """
        value = value.strip()
        if not value:
            raise ValueError(f"{field_name} cannot be empty.")
        return value

    @staticmethod
    def validate_marks_input(marks: float) -> float:
        """
        Validates that marks fall within the accepted range.

        Args:
            marks: The marks to validate.

        Returns:
            The marks as a float.

        Raises:
            ValueError: If the marks are outside 0-100.
        """
        marks = float(marks)
        if not MIN_MARKS <= marks <= MAX_MARKS:
            raise ValueError(f"Marks must be 0-100, got {marks}.")
        return marks
