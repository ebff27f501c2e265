# models/student_registry.py

"""
The StudentRegistry is the single owner of all `Student` records for the session.

Records are kept in a dictionary keyed by roll number. Nothing outside the registry
reads or writes that dictionary: lookups return immutable `Student` objects and
listings return new lists.

Every operation runs under one lock, so operations are totally ordered with respect
to each other and no caller ever observes a half-applied change. Adding and updating
run a simulated loading task (see `core.loader`) before the change is applied; the
task runs inside the same critical section and is always joined before the
operation continues. An interrupted task does not fail the operation.

Manipulator and lookup methods return a `Response` rather than raising.
"""

from __future__ import annotations

import logging
import threading
from typing import TextIO

from core.loader import Loader, LoaderConfig, run_blocking
from core.response import ErrorCode, Response
from models.student import Student

logger = logging.getLogger(__name__)


class StudentRegistry:

    def __init__(
        self,
        loader_config: LoaderConfig | None = None,
        loader_stream: TextIO | None = None,
    ):
        self._students: dict[int, Student] = {}
        self._lock = threading.Lock()
        self._loader_config: LoaderConfig = loader_config or LoaderConfig()
        self._loader_stream: TextIO | None = loader_stream
        self._active_loader: Loader | None = None

    # === properties ===

    @property
    def is_loading(self) -> bool:
        return self._active_loader is not None

    # === data manipulators ===

    def add_student(self, student: Student) -> Response:
        """
        Adds a `Student` to the registry after running the simulated loading task.

        Args:
            student (Student): The record to add.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was added.
                    - False if the record is missing, the roll number is taken, or an unexpected error occurs.
                - detail (str | None):
                    - On failure, a human-readable description naming the roll number where relevant.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_ERROR` if the record is missing or the roll number is a duplicate.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 400 on failure
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The added record.
                        - "loader_completed" (bool): False if the loading task was interrupted.
                    - On failure:
                        - None

        Notes:
            - The duplicate check, the loading task, and the insert share one critical section.
            - Validation failures return before the loading task starts.
        """
        with self._lock:
            try:
                self.require_student(student, "Student data is null.")
                self.require_unique_roll_no(student.roll_no)

                loader_completed = self._run_loader("Loading")

                self._students[student.roll_no] = student

            except ValueError as e:
                logger.warning("add rejected: %s", e)
                return Response.fail(
                    detail=str(e),
                    error=ErrorCode.VALIDATION_ERROR,
                )

            except Exception as e:
                logger.exception("unexpected error while adding a student")
                return Response.fail(
                    detail=f"Unexpected error: {e}",
                    error=ErrorCode.INTERNAL_ERROR,
                )

            else:
                logger.info("added roll no %s", student.roll_no)

                return Response.succeed(
                    detail="Student added.",
                    data={
                        "record": student,
                        "loader_completed": loader_completed,
                    },
                )

    def delete_student(self, roll_no: int) -> Response:
        """
        Removes the `Student` stored under a roll number.

        Args:
            roll_no (int): The roll number to remove.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was removed.
                    - False if no record exists for the roll number or an unexpected error occurs.
                - detail (str | None):
                    - On failure, a human-readable description naming the roll number.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the roll number is absent.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the roll number is absent
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The removed record.
                    - On failure:
                        - None

        Notes:
            - No loading task runs for deletions.
        """
        with self._lock:
            try:
                removed = self._students.pop(roll_no)

            except KeyError:
                logger.warning("delete rejected: roll no %s not found", roll_no)
                return self._not_found(roll_no)

            except Exception as e:
                logger.exception("unexpected error while deleting a student")
                return Response.fail(
                    detail=f"Unexpected error: {e}",
                    error=ErrorCode.INTERNAL_ERROR,
                )

            else:
                logger.info("deleted roll no %s", roll_no)

                return Response.succeed(
                    detail="Student deleted.",
                    data={
                        "record": removed,
                    },
                )

    def update_student(self, roll_no: int, student: Student) -> Response:
        """
        Replaces the `Student` stored under a roll number after running the simulated loading task.

        Args:
            roll_no (int): The roll number to look up.
            student (Student): The replacement record.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was replaced.
                    - False if the replacement is missing, the roll number is absent, or an unexpected error occurs.
                - detail (str | None):
                    - On failure, a human-readable description naming the roll number where relevant.
                    - On success, a simple confirmation message.
                - error (ErrorCode | str | None):
                    - `ErrorCode.VALIDATION_ERROR` if the replacement is missing.
                    - `ErrorCode.NOT_FOUND` if the roll number is absent.
                    - `ErrorCode.INTERNAL_ERROR` for unexpected errors.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the roll number is absent
                    - 400 for other failures
                - data (dict | None): Payload with the following keys:
                    - On success:
                        - "record" (Student): The stored replacement.
                        - "previous" (Student): The record that was replaced.
                        - "loader_completed" (bool): False if the loading task was interrupted.
                    - On failure:
                        - None

        Notes:
            - The stored record is replaced wholesale; no fields are merged from the previous record.
            - The replacement is stored under `roll_no` even if `student.roll_no` differs.
            - The replacement is checked before the roll number.
        """
        with self._lock:
            try:
                self.require_student(student, "New student data is null.")

                previous = self._students.get(roll_no)

                if previous is None:
                    logger.warning("update rejected: roll no %s not found", roll_no)
                    return self._not_found(roll_no)

                if student.roll_no != roll_no:
                    logger.info(
                        "storing record with roll no %s under roll no %s",
                        student.roll_no,
                        roll_no,
                    )

                loader_completed = self._run_loader("Updating")

                self._students[roll_no] = student

            except ValueError as e:
                logger.warning("update rejected: %s", e)
                return Response.fail(
                    detail=str(e),
                    error=ErrorCode.VALIDATION_ERROR,
                )

            except Exception as e:
                logger.exception("unexpected error while updating a student")
                return Response.fail(
                    detail=f"Unexpected error: {e}",
                    error=ErrorCode.INTERNAL_ERROR,
                )

            else:
                logger.info("updated roll no %s", roll_no)

                return Response.succeed(
                    detail="Student updated.",
                    data={
                        "record": student,
                        "previous": previous,
                        "loader_completed": loader_completed,
                    },
                )

    def interrupt_loading(self) -> bool:
        """
        Signals the in-flight loading task, if any, to stop early.

        Returns:
            True if a loading task was running and has been signalled, and False otherwise.

        Notes:
            - Does not take the registry lock, since the lock is held for the whole loading task.
            - The interrupted operation still applies its change.
        """
        loader = self._active_loader

        if loader is None:
            return False

        loader.cancel()
        return True

    # === data accessors ===

    def search_student(self, roll_no: int) -> Response:
        """
        Finds the `Student` stored under a roll number.

        Args:
            roll_no (int): The roll number to look up.

        Returns:
            Response: A structured response with the following contract:
                - success (bool):
                    - True if the record was found.
                    - False if no record exists for the roll number.
                - detail (str | None):
                    - On failure, a human-readable description naming the roll number.
                    - On success, None.
                - error (ErrorCode | str | None):
                    - `ErrorCode.NOT_FOUND` if the roll number is absent.
                - status_code (int | None):
                    - 200 on success
                    - 404 if the roll number is absent
                - data (dict): Payload with the following keys:
                    - On success:
                        - "record" (Student): The matched record.
                    - On failure:
                        - None

        Notes:
            - This method is read-only and does not raise.
        """
        with self._lock:
            student = self._students.get(roll_no)

            if student is None:
                return self._not_found(roll_no)

            return Response.succeed(
                data={
                    "record": student,
                },
            )

    def list_all(self) -> Response:
        """
        Returns every `Student` in the registry, ordered by roll number.

        Returns:
            Response: A structured response with the following contract:
                - success (bool): Always True.
                - detail (str | None): None.
                - error (ErrorCode | str | None): None.
                - status_code (int | None): 200.
                - data (dict): Payload with the following keys:
                    - "records" (list[Student]): A new list of records, empty if the registry is empty.

        Notes:
            - This method is read-only and does not raise.
            - An empty registry is not a failure.
        """
        with self._lock:
            records = [self._students[key] for key in sorted(self._students)]

        return Response.succeed(
            data={
                "records": records,
            },
        )

    # === data validators ===

    def require_student(self, student: Student | None, message: str) -> None:
        """
        Validates that a record was supplied.

        Raises:
            ValueError: If `student` is None or not a `Student`.
        """
        if student is None:
            raise ValueError(message)

        if not isinstance(student, Student):
            raise ValueError(f"Expected a Student, got {type(student).__name__}.")

    def require_unique_roll_no(self, roll_no: int) -> None:
        """
        Validates that no existing student holds the given roll number.

        Raises:
            ValueError: If the roll number is already in use.
        """
        if roll_no in self._students:
            raise ValueError(f"Duplicate roll number: {roll_no}")

    # === helper methods ===

    def _run_loader(self, message: str) -> bool:
        loader = Loader(message, self._loader_config, self._loader_stream)
        self._active_loader = loader

        try:
            return run_blocking(loader)

        finally:
            self._active_loader = None

    def _not_found(self, roll_no: int) -> Response:
        return Response.fail(
            detail=f"Roll no {roll_no} not found.",
            error=ErrorCode.NOT_FOUND,
            status_code=404,
        )

    # === dunder methods ===

    def __len__(self) -> int:
        with self._lock:
            return len(self._students)

    def __contains__(self, roll_no: object) -> bool:
        with self._lock:
            return roll_no in self._students

    def __repr__(self) -> str:
        return f"StudentRegistry({len(self)} students)"
