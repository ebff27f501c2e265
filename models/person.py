# models/person.py

"""
Abstract base for people tracked by the program.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class Person(ABC):

    def __init__(self, name: str, email: str):
        self._name: str = name
        self._email: str = email

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    # === display ===

    @abstractmethod
    def display_info(self) -> str:
        """
        Returns a multi-line, human-readable rendering of every field.
        """
