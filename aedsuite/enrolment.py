"""Queued enrolment requests and the rules deciding whether they are granted."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from typing import Union

from .lessons import ChangeRequest, JoinRequest, Lesson, MultiChangeRequest
from .registry import Registry, compatible

Request = Union[JoinRequest, ChangeRequest, MultiChangeRequest]

DEFAULT_MAX_CAPACITY = 23

# Largest tolerated difference between class sizes of one UC, exclusive.
_MAX_IMBALANCE = 4


def _clash_free(schedule: list[Lesson], uc_code: str, class_code: str | None) -> bool:
    """Whether the practical lessons of the target UC (and class) fit the schedule."""
    for lesson in schedule:
        if lesson.class_type == "T" or lesson.uc_code != uc_code:
            continue
        if class_code is not None and lesson.class_code != class_code:
            continue
        if any(lesson != other and not compatible(lesson, other) for other in schedule):
            return False
    return True


class EnrolmentOffice:
    """Collects enrolment requests and grants or rejects them when processed."""

    def __init__(self, registry: Registry, max_capacity: int = DEFAULT_MAX_CAPACITY) -> None:
        self.registry = registry
        self.max_capacity = max_capacity
        self._pending: deque[Request] = deque()
        self.rejected: list[Request] = []

    def _check_offer(self, code: str, uc_code: str, class_code: str) -> None:
        if not self.registry.student_exists(code):
            raise KeyError(code)
        if not self.registry.class_offers_uc(uc_code, class_code):
            raise ValueError(f"class {class_code} does not offer {uc_code}")

    def _make_change(self, code: str, uc_code: str, class_code: str) -> ChangeRequest:
        self._check_offer(code, uc_code, class_code)
        student = self.registry.students[code]
        current = next((c for u, c in student.enrolments if u == uc_code), None)
        if current is None:
            raise ValueError(f"student {code} is not enrolled in {uc_code}")
        return ChangeRequest(code, uc_code, current, class_code)

    def submit_join(self, code: str, uc_code: str, class_code: str) -> JoinRequest:
        """Queue a request to join a class for a UC the student does not take yet."""
        self._check_offer(code, uc_code, class_code)
        if self.registry.student_in_uc(code, uc_code):
            raise ValueError(f"student {code} is already enrolled in {uc_code}")
        request = JoinRequest(code, uc_code, class_code)
        self._pending.append(request)
        return request

    def submit_change(self, code: str, uc_code: str, class_code: str) -> ChangeRequest:
        """Queue a request to move to another class of a UC the student takes."""
        request = self._make_change(code, uc_code, class_code)
        self._pending.append(request)
        return request

    def submit_changes(
        self, code: str, changes: Iterable[tuple[str, str]]
    ) -> MultiChangeRequest:
        """Queue several (UC code, class code) changes to be granted all or none."""
        request = MultiChangeRequest(
            code, tuple(self._make_change(code, uc, cls) for uc, cls in changes)
        )
        self._pending.append(request)
        return request

    def process_pending(self) -> list[tuple[Request, bool]]:
        """Decide every queued request in order; return each with its outcome."""
        outcomes = []
        while self._pending:
            request = self._pending.popleft()
            accepted = self._process(request)
            if not accepted:
                self.rejected.append(request)
            outcomes.append((request, accepted))
        return outcomes

    def pending_count(self, code: str) -> int:
        """Number of the student's requests still waiting to be processed."""
        return sum(1 for request in self._pending if request.student == code)

    def rejected_count(self, code: str) -> int:
        """Number of the student's requests that were turned down."""
        return sum(1 for request in self.rejected if request.student == code)

    def _process(self, request: Request) -> bool:
        if isinstance(request, JoinRequest):
            return self._process_join(request)
        if isinstance(request, ChangeRequest):
            if not self._change_allowed(request, []):
                return False
            self._apply_change(request)
            return True
        return self._process_multi(request)

    def _process_join(self, request: JoinRequest) -> bool:
        registry = self.registry
        schedule = registry.student_schedule(request.student) + registry.uc_class_schedule(
            request.uc_code, request.class_code
        )
        if not _clash_free(schedule, request.uc_code, None):
            return False
        smallest, largest = registry.class_min_max(request.uc_code)
        total = registry.count_in_uc_class(request.uc_code, request.class_code) + 1
        largest = max(largest, total)
        if (
            total > self.max_capacity
            or total - smallest >= _MAX_IMBALANCE
            or largest - total >= _MAX_IMBALANCE
        ):
            return False
        registry.students[request.student].enrolments.append(
            (request.uc_code, request.class_code)
        )
        return True

    def _change_allowed(self, change: ChangeRequest, earlier: list[Lesson]) -> bool:
        """Check one change; lessons of earlier changes in a batch are in ``earlier``."""
        registry = self.registry
        target = registry.uc_class_schedule(change.uc_code, change.to_class)
        schedule = registry.student_schedule(change.student) + earlier + target
        if not _clash_free(schedule, change.uc_code, change.to_class):
            return False
        smallest, largest = registry.class_min_max(change.uc_code)
        left = registry.count_in_uc_class(change.uc_code, change.from_class) - 1
        smallest = min(smallest, left)
        if left - smallest >= _MAX_IMBALANCE or largest - left >= _MAX_IMBALANCE:
            return False
        total = registry.count_in_uc_class(change.uc_code, change.to_class) + 1
        largest = max(largest, total)
        return not (
            total > self.max_capacity
            or total - smallest >= _MAX_IMBALANCE
            or largest - total >= _MAX_IMBALANCE
        )

    def _process_multi(self, request: MultiChangeRequest) -> bool:
        earlier: list[Lesson] = []
        for change in request.changes:
            if not self._change_allowed(change, earlier):
                return False
            earlier.extend(
                self.registry.uc_class_schedule(change.uc_code, change.to_class)
            )
        for change in request.changes:
            self._apply_change(change)
        return True

    def _apply_change(self, change: ChangeRequest) -> None:
        student = self.registry.students[change.student]
        student.enrolments = [
            (uc, change.to_class if uc == change.uc_code else cls)
            for uc, cls in student.enrolments
        ]