"""
Client for the modern student system interface.

`StudentManagementClient` never sees the legacy store: it is handed any
object that satisfies `ModernStudentSystem` and keeps a plain reference to
it. This is also where store outcomes turn into log lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console

from student_system.domain.models import RecordOutcome
from student_system.reporter import print_roster
from student_system.systems.abstract import ModernStudentSystem
from student_system.utils.logging import get_logger

log = get_logger(__name__)

_OUTCOME_MESSAGES = {
    RecordOutcome.ADDED: "Added student with ID {student_id}",
    RecordOutcome.REMOVED: "Removed student with ID {student_id}",
    RecordOutcome.UPDATED: "Updated student with ID {student_id}",
    RecordOutcome.NOT_FOUND: "Student with ID {student_id} not found",
}


@dataclass
class RosterSnapshot:
    """What `display_all_students` rendered."""

    total: int
    records: List[str] = field(default_factory=list)


class StudentManagementClient:
    """
    Thin client over a modern student system.

    Parameters
    ----------
    system : ModernStudentSystem
        Backing system. Not owned: the caller controls its lifetime.
    console : rich.console.Console, optional
        Where `display_all_students` writes. Defaults to stdout.
    """

    def __init__(self, system: ModernStudentSystem, console: Optional[Console] = None) -> None:
        self._system = system
        self._console = console or Console()

    def register_new_student(self, student_id: int, name: str, gpa: float) -> RecordOutcome:
        outcome = self._system.add_student(student_id, name, gpa)
        self._report("add", student_id, outcome)
        return outcome

    def remove_student(self, student_id: int) -> RecordOutcome:
        outcome = self._system.remove_student(student_id)
        self._report("remove", student_id, outcome)
        return outcome

    def update_student_details(self, student_id: int, name: str, gpa: float) -> RecordOutcome:
        outcome = self._system.update_student_details(student_id, name, gpa)
        self._report("update", student_id, outcome)
        return outcome

    def display_all_students(self) -> RosterSnapshot:
        snapshot = RosterSnapshot(
            total=self._system.get_total_students(),
            records=list(self._system.get_all_students_info()),
        )
        print_roster(snapshot.total, snapshot.records, self._console)
        return snapshot

    def _report(self, operation: str, student_id: int, outcome: RecordOutcome) -> None:
        message = _OUTCOME_MESSAGES[outcome].format(student_id=student_id)
        extra = {"operation": operation, "student_id": student_id, "outcome": outcome.value}
        if outcome.found:
            log.info(message, extra=extra)
        else:
            log.warning(message, extra=extra)


__all__ = ["RosterSnapshot", "StudentManagementClient"]
