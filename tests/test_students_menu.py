# tests/test_students_menu.py

import pytest

from cli import main
from cli.menus import students_menu
from core.config import AppConfig
from models.student import Student


def test_add_student(sample_registry, feed_input, capsys):
    feed_input("7", "Asha", "asha@mail.com", "MCA", "91")

    students_menu.add_student(sample_registry)

    assert "Student added." in capsys.readouterr().out
    assert sample_registry.search_student(7).data["record"].grade == "A"


def test_add_student_rejects_bad_marks(sample_registry, feed_input, capsys):
    feed_input("7", "Asha", "asha@mail.com", "MCA", "120")

    students_menu.add_student(sample_registry)

    assert "[ERROR] Input error: Marks must be 0-100" in capsys.readouterr().out
    assert len(sample_registry) == 0


def test_add_student_rejects_empty_name(sample_registry, feed_input, capsys):
    feed_input("7", "")

    students_menu.add_student(sample_registry)

    assert "Name cannot be empty." in capsys.readouterr().out
    assert len(sample_registry) == 0


def test_add_duplicate_student(sample_registry, sample_student, feed_input, capsys):
    sample_registry.add_student(sample_student)
    feed_input("102", "Ravi", "ravi@mail.com", "BBA", "50")

    students_menu.add_student(sample_registry)

    out = capsys.readouterr().out
    assert "[ERROR: VALIDATION_ERROR] Duplicate roll number: 102" in out
    assert sample_registry.search_student(102).data["record"] == sample_student


def test_add_sample_student(sample_registry, capsys):
    students_menu.add_sample_student(sample_registry)

    out = capsys.readouterr().out
    assert "Student added." in out
    assert "Roll No: 102" in out
    assert "Grade: B" in out


def test_view_all_students_empty(sample_registry, capsys):
    students_menu.view_all_students(sample_registry)

    assert "No records." in capsys.readouterr().out


def test_view_all_students(sample_registry, sample_student, other_student, capsys):
    sample_registry.add_student(other_student)
    sample_registry.add_student(sample_student)

    students_menu.view_all_students(sample_registry)

    out = capsys.readouterr().out
    assert out.index("Roll No: 102") < out.index("Roll No: 205")


def test_search_student(sample_registry, sample_student, feed_input, capsys):
    sample_registry.add_student(sample_student)
    feed_input("102")

    students_menu.search_student(sample_registry)

    out = capsys.readouterr().out
    assert "Student found:" in out
    assert "Name: Karan" in out


def test_search_missing_student(sample_registry, feed_input, capsys):
    feed_input("404")

    students_menu.search_student(sample_registry)

    assert "[ERROR: NOT_FOUND] Roll no 404 not found." in capsys.readouterr().out


def test_update_student(sample_registry, sample_student, feed_input, capsys):
    sample_registry.add_student(sample_student)
    feed_input("102", "Karan", "karan@mail.com", "MCA", "55")

    students_menu.update_student(sample_registry)

    out = capsys.readouterr().out
    assert "Existing record:" in out
    assert "Student updated." in out

    updated = sample_registry.search_student(102).data["record"]
    assert updated.course == "MCA"
    assert updated.grade == "D"


def test_update_missing_student_stops_before_prompting(
    sample_registry, feed_input, capsys
):
    feed_input("102")

    students_menu.update_student(sample_registry)

    assert "[ERROR: NOT_FOUND]" in capsys.readouterr().out


def test_update_student_bad_input_keeps_record(
    sample_registry, sample_student, feed_input, capsys
):
    sample_registry.add_student(sample_student)
    feed_input("102", "Karan", "karan@mail.com", "MCA", "x")

    students_menu.update_student(sample_registry)

    assert "Invalid decimal input" in capsys.readouterr().out
    assert sample_registry.search_student(102).data["record"] == sample_student


def test_delete_student(sample_registry, sample_student, feed_input, capsys):
    sample_registry.add_student(sample_student)
    feed_input("102")

    students_menu.delete_student(sample_registry)

    assert "Student deleted." in capsys.readouterr().out
    assert 102 not in sample_registry


def test_delete_student_bad_roll_no(sample_registry, feed_input, capsys):
    feed_input("one")

    students_menu.delete_student(sample_registry)

    assert "Invalid integer input" in capsys.readouterr().out


def test_sample_student_matches_fixture(sample_student):
    assert Student.from_dict(students_menu.SAMPLE_STUDENT) == sample_student


# === main menu ===


def test_run_cli_demo_then_exit(feed_input, capsys, monkeypatch):
    monkeypatch.setattr(main, "setup_logging", lambda level: None)
    config = AppConfig(ticks=5, tick_interval=0.0)
    feed_input("6", "2", "0")

    with pytest.raises(SystemExit):
        main.run_cli(config)

    out = capsys.readouterr().out
    assert "Loading.....\n" in out
    assert "Student added." in out
    assert out.count("Roll No: 102") == 2
    assert "Program execution completed." in out
