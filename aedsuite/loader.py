"""Reading the schedule CSV files."""

from __future__ import annotations

import os
from typing import Iterator

from .lessons import ClassUc, Lesson, Student


def _rows(path: str | os.PathLike) -> Iterator[list[str]]:
    """Comma-split rows after the header, stopping at the first empty line."""
    with open(path, encoding="utf-8") as handle:
        for number, line in enumerate(handle):
            line = line.rstrip("\r\n")
            if not line:
                return
            if number == 0:
                continue
            yield line.split(",")


def read_classes(path: str | os.PathLike) -> list[Lesson]:
    """Read lessons (ClassCode,UcCode,Weekday,StartHour,Duration,Type)."""
    return [
        Lesson(row[0], row[1], row[2], float(row[3]), float(row[4]), row[5])
        for row in _rows(path)
    ]


def read_students(path: str | os.PathLike) -> dict[str, Student]:
    """Read enrolments (StudentCode,StudentName,UcCode,ClassCode).

    Rows of the same student are merged; the result is ordered by student code.
    """
    students: dict[str, Student] = {}
    for code, name, uc_code, class_code, *_ in _rows(path):
        student = students.setdefault(code, Student(code, name, []))
        student.enrolments.append((uc_code, class_code))
    return {code: students[code] for code in sorted(students)}


def read_classes_per_uc(path: str | os.PathLike) -> list[ClassUc]:
    """Read UC/class pairs (UcCode,ClassCode), sorted."""
    return sorted(ClassUc(row[0], row[1]) for row in _rows(path))