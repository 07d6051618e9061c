"""Lessons, class/UC pairs, students and the enrolment requests made by them."""

from __future__ import annotations

from dataclasses import dataclass, field

_WEEKDAY_ORDER = {
    "Monday": 1,
    "Tuesday": 2,
    "Wednesday": 3,
    "Thursday": 4,
    "Friday": 5,
}


@dataclass(frozen=True)
class Lesson:
    """One weekly slot of a UC taught to a class."""

    class_code: str
    uc_code: str
    weekday: str
    start_hour: float
    duration: float
    class_type: str

    def weekday_order(self) -> int:
        """Position of the weekday (Monday is 1, Friday is 5, anything else 0)."""
        return _WEEKDAY_ORDER.get(self.weekday, 0)

    def type_order(self) -> int:
        """1 for theoretical ("T") lessons, 2 for every other kind."""
        return 1 if self.class_type == "T" else 2

    def _key(self) -> tuple[int, float, str]:
        return (self.weekday_order(), self.start_hour, self.class_code)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Lesson):
            return NotImplemented
        return self._key() < other._key()


@dataclass(frozen=True, order=True)
class ClassUc:
    """A UC offered in a class; ordered by UC code, then class code."""

    uc_code: str
    class_code: str


@dataclass
class Student:
    """A student and the (UC code, class code) pairs they are enrolled in."""

    code: str
    name: str
    enrolments: list[tuple[str, str]] = field(default_factory=list)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Student):
            return NotImplemented
        return self.code < other.code

    def uc_codes(self) -> list[str]:
        """UC codes of the student's enrolments, in enrolment order."""
        return [uc for uc, _ in self.enrolments]


@dataclass(frozen=True)
class JoinRequest:
    """A student asks to join a class for a UC."""

    student: str
    uc_code: str
    class_code: str


@dataclass(frozen=True)
class ChangeRequest:
    """A student asks to move from one class to another within a UC."""

    student: str
    uc_code: str
    from_class: str
    to_class: str


@dataclass(frozen=True)
class MultiChangeRequest:
    """Several class changes by one student, to be accepted all or none."""

    student: str
    changes: tuple[ChangeRequest, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "changes", tuple(self.changes))