"""Ordering and formatting of timetables."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

from .lessons import Lesson, Student


class SortOrder(Enum):
    """Ways a timetable can be ordered; unknown choices mean DEFAULT."""

    DEFAULT = 1
    DESCENDING = 2
    THEORY_FIRST = 3
    UC_CODE = 4
    DURATION = 5

    @classmethod
    def _missing_(cls, value: object) -> "SortOrder":
        return cls.DEFAULT


def _default_key(lesson: Lesson):
    return (lesson.weekday_order(), lesson.start_hour, lesson.class_code)


def _theory_key(lesson: Lesson):
    return (lesson.type_order(), *_default_key(lesson))


def _uc_key(lesson: Lesson):
    return (lesson.uc_code, *_theory_key(lesson))


def _duration_key(lesson: Lesson):
    # Within the same duration and weekday, ties are broken by class code only.
    return (lesson.duration, lesson.weekday_order(), lesson.class_code)


def sort_lessons(lessons: Iterable[Lesson], order: SortOrder | int = SortOrder.DEFAULT) -> list[Lesson]:
    """Return the lessons sorted in the requested order."""
    order = SortOrder(order)
    if order is SortOrder.DESCENDING:
        return sorted(lessons, key=_default_key, reverse=True)
    key = {
        SortOrder.THEORY_FIRST: _theory_key,
        SortOrder.UC_CODE: _uc_key,
        SortOrder.DURATION: _duration_key,
    }.get(order, _default_key)
    return sorted(lessons, key=key)


def lessons_for_student(student: Student, lessons: Iterable[Lesson]) -> list[Lesson]:
    """Lessons matching each of the student's enrolments, in enrolment order."""
    lessons = list(lessons)
    return [
        lesson
        for uc_code, class_code in student.enrolments
        for lesson in lessons
        if lesson.uc_code == uc_code and lesson.class_code == class_code
    ]


def format_hour(hour: float) -> str:
    """Render a fractional hour as H:MM with ten-minute resolution."""
    hours = int(hour)
    minutes = int((hour - hours) * 6)
    return f"{hours}:{minutes}0"


def end_hour(start: float, duration: float) -> str:
    """Formatted time at which a lesson starting at ``start`` ends."""
    return format_hour(start + duration)


def format_lesson(lesson: Lesson) -> str:
    """One timetable line describing the lesson."""
    return (
        f"{lesson.weekday} | {lesson.uc_code} {lesson.class_type} class in "
        f"{lesson.class_code} from {format_hour(lesson.start_hour)} to "
        f"{end_hour(lesson.start_hour, lesson.duration)}"
    )