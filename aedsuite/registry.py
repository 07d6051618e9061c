"""Queries and updates over lessons, students and the classes offering each UC."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from .lessons import ClassUc, Lesson, Student
from .timetable import lessons_for_student

# Smallest class size reported when a UC is offered in no class at all.
_NO_MINIMUM = 2**31 - 1

_VALID_YEARS = ("1", "2", "3")


def compatible(first: Lesson, second: Lesson) -> bool:
    """Whether two lessons can both be attended.

    Theoretical lessons never clash, nor do lessons on different days.
    Otherwise they clash when one starts strictly inside the other.
    """
    if first.class_type == "T" or second.class_type == "T":
        return True
    if first.weekday != second.weekday:
        return True
    if (
        first.start_hour + first.duration > second.start_hour
        and first.start_hour < second.start_hour
    ):
        return False
    if (
        second.start_hour + second.duration > first.start_hour
        and second.start_hour < first.start_hour
    ):
        return False
    return True


class Registry:
    """All schedule data with the lookups the menus need."""

    def __init__(
        self,
        lessons: Iterable[Lesson],
        students: Mapping[str, Student] | Iterable[Student],
        classes_per_uc: Iterable[ClassUc],
    ) -> None:
        self.lessons: list[Lesson] = list(lessons)
        if isinstance(students, Mapping):
            students = students.values()
        self.students: dict[str, Student] = {
            student.code: student for student in sorted(students, key=lambda s: s.code)
        }
        self.classes_per_uc: list[ClassUc] = sorted(classes_per_uc)

    def _student(self, code: str) -> Student:
        student = self.students.get(code)
        if student is None or not student.name:
            raise KeyError(code)
        return student

    def _enrolments(self) -> Iterable[tuple[Student, str, str]]:
        for student in self.students.values():
            for uc_code, class_code in student.enrolments:
                yield student, uc_code, class_code

    def student_exists(self, code: str) -> bool:
        """Whether a student with that code (and a name) is known."""
        student = self.students.get(code)
        return student is not None and student.name != ""

    def class_exists(self, class_code: str) -> bool:
        """Whether any student is enrolled in the class."""
        return any(c == class_code for _, _, c in self._enrolments())

    def uc_exists(self, uc_code: str) -> bool:
        """Whether any student is enrolled in the UC."""
        return any(u == uc_code for _, u, _ in self._enrolments())

    def uc_in_class_exists(self, class_code: str, uc_code: str) -> bool:
        """Whether any student takes the UC in that class."""
        return any(
            u == uc_code and c == class_code for _, u, c in self._enrolments()
        )

    def class_offers_uc(self, uc_code: str, class_code: str) -> bool:
        """Whether the class is listed as offering the UC."""
        return ClassUc(uc_code, class_code) in self.classes_per_uc

    def student_in_uc(self, code: str, uc_code: str) -> bool:
        """Whether the student is enrolled in the UC."""
        student = self.students.get(code)
        return student is not None and uc_code in student.uc_codes()

    def student_schedule(self, code: str) -> list[Lesson]:
        """Lessons of every enrolment of the student; KeyError if unknown."""
        return lessons_for_student(self._student(code), self.lessons)

    def class_schedule(self, class_code: str) -> list[Lesson]:
        """Every lesson taught to the class."""
        return [lesson for lesson in self.lessons if lesson.class_code == class_code]

    def uc_schedule(self, uc_code: str) -> list[Lesson]:
        """Every lesson of the UC, in all classes."""
        return [lesson for lesson in self.lessons if lesson.uc_code == uc_code]

    def uc_class_schedule(self, uc_code: str, class_code: str) -> list[Lesson]:
        """Lessons of the UC taught to that class."""
        return [
            lesson
            for lesson in self.lessons
            if lesson.uc_code == uc_code and lesson.class_code == class_code
        ]

    def students_in_class(self, class_code: str) -> list[str]:
        """Sorted, distinct names of students enrolled in the class."""
        return sorted({s.name for s, _, c in self._enrolments() if c == class_code})

    def students_in_uc(self, uc_code: str) -> list[str]:
        """Sorted, distinct names of students enrolled in the UC."""
        return sorted({s.name for s, u, _ in self._enrolments() if u == uc_code})

    def students_in_uc_class(self, uc_code: str, class_code: str) -> list[str]:
        """Sorted, distinct names of students taking the UC in that class."""
        return sorted(
            {
                s.name
                for s, u, c in self._enrolments()
                if u == uc_code and c == class_code
            }
        )

    def count_in_uc_class(self, uc_code: str, class_code: str) -> int:
        """Number of distinct student names taking the UC in that class."""
        return len(self.students_in_uc_class(uc_code, class_code))

    def students_with_more_ucs(self, n: int) -> list[str]:
        """Sorted, distinct names of students with more than ``n`` enrolments."""
        return sorted(
            {s.name for s in self.students.values() if len(s.enrolments) > n}
        )

    def students_in_year(self, year: str | int) -> list[tuple[str, str]]:
        """(code, name) of students with a class in that year (1, 2 or 3), sorted."""
        year = str(year)
        if year not in _VALID_YEARS:
            raise ValueError(f"invalid year: {year!r}")
        return sorted(
            {
                (s.code, s.name)
                for s in self.students.values()
                if any(c.startswith(year) for _, c in s.enrolments)
            }
        )

    def classes_of_uc(self, uc_code: str) -> list[str]:
        """Sorted codes of the classes offering the UC."""
        return sorted(
            {pair.class_code for pair in self.classes_per_uc if pair.uc_code == uc_code}
        )

    def class_min_max(self, uc_code: str) -> tuple[int, int]:
        """Smallest and largest enrolment count among the UC's classes."""
        smallest, largest = _NO_MINIMUM, 0
        for class_code in self.classes_of_uc(uc_code):
            count = sum(
                1
                for _, u, c in self._enrolments()
                if u == uc_code and c == class_code
            )
            smallest = min(smallest, count)
            largest = max(largest, count)
        return smallest, largest

    def leave_uc(self, code: str, uc_code: str) -> None:
        """Drop every enrolment of the student in the UC.

        Raises KeyError for an unknown student and ValueError when the
        student is not enrolled in the UC.
        """
        student = self._student(code)
        if uc_code not in student.uc_codes():
            raise ValueError(f"student {code} is not enrolled in {uc_code}")
        student.enrolments = [
            (u, c) for u, c in student.enrolments if u != uc_code
        ]