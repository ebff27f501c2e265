# tests/conftest.py

import io

import pytest

from core.loader import LoaderConfig
from models.student import Student
from models.student_registry import StudentRegistry


@pytest.fixture
def instant_loader_config():
    return LoaderConfig(ticks=5, tick_interval=0.0)


@pytest.fixture
def loader_stream():
    return io.StringIO()


@pytest.fixture
def sample_registry(instant_loader_config, loader_stream):
    return StudentRegistry(
        loader_config=instant_loader_config, loader_stream=loader_stream
    )


@pytest.fixture
def sample_student():
    return Student(102, "Karan", "karan@mail.com", "BCA", 77.5)


@pytest.fixture
def other_student():
    return Student(205, "Meera", "meera@mail.com", "BSc", 91.0)


@pytest.fixture
def feed_input(monkeypatch):
    """
    Replaces `input()` with a function that returns the given answers in order.
    """

    def _feed(*answers: str) -> None:
        answers_iter = iter(answers)
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(answers_iter))

    return _feed
