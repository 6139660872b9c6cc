"""
Scripted demo of the adapter, driven through the modern interface only.

Usage:
    from student_system.demo import run_demo

    summary = run_demo()
    print(summary.final.total)

The sequence is fixed: register three students, list them, remove 1002,
list again, update 1003, list a final time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from rich.console import Console

from student_system.client import RosterSnapshot, StudentManagementClient
from student_system.reporter import print_heading
from student_system.systems.abstract import ModernStudentSystem
from student_system.systems.adapter import StudentSystemAdapter
from student_system.utils.logging import get_logger

log = get_logger(__name__)

INITIAL_STUDENTS = (
    (1001, "John Smith", 3.75),
    (1002, "Emily Johnson", 3.92),
    (1003, "Michael Brown", 3.45),
)
REMOVED_STUDENT_ID = 1002
UPDATED_STUDENT = (1003, "Michael Brown Jr.", 3.85)


@dataclass
class StageSnapshot:
    label: str
    total: int
    records: List[str] = field(default_factory=list)


@dataclass
class DemoSummary:
    """Roster captured after each listing step of the demo."""

    stages: List[StageSnapshot] = field(default_factory=list)

    @property
    def final(self) -> StageSnapshot:
        return self.stages[-1]

    def record(self, label: str, snapshot: RosterSnapshot) -> None:
        self.stages.append(StageSnapshot(label=label, total=snapshot.total, records=snapshot.records))


def run_demo(
    system: Optional[ModernStudentSystem] = None,
    console: Optional[Console] = None,
) -> DemoSummary:
    """
    Run the scripted demo and return what each listing showed.

    Parameters
    ----------
    system : ModernStudentSystem | None
        System to drive. Defaults to a fresh `StudentSystemAdapter`.
    console : rich.console.Console | None
        Output target for headings and listings. Defaults to stdout.
    """
    system = system if system is not None else StudentSystemAdapter()
    console = console or Console()
    client = StudentManagementClient(system, console=console)
    summary = DemoSummary()

    log.info("[DEMO START]", extra={"system": type(system).__name__})

    console.print("Welcome to Student Management System", markup=False, highlight=False)
    console.print("=" * 36, markup=False, highlight=False)

    for student_id, name, gpa in INITIAL_STUDENTS:
        client.register_new_student(student_id, name, gpa)

    print_heading("Student Records:", console)
    summary.record("registered", client.display_all_students())

    console.print()
    console.print(f"Removing student with ID {REMOVED_STUDENT_ID}...", markup=False, highlight=False)
    client.remove_student(REMOVED_STUDENT_ID)

    print_heading("Updated Student Records:", console)
    summary.record("after removal", client.display_all_students())

    student_id, name, gpa = UPDATED_STUDENT
    console.print()
    console.print(f"Updating details for student with ID {student_id}...", markup=False, highlight=False)
    client.update_student_details(student_id, name, gpa)

    print_heading("Final Student Records:", console)
    summary.record("after update", client.display_all_students())

    log.info(
        "[DEMO COMPLETE]",
        extra={"stages": len(summary.stages), "total_students": summary.final.total},
    )
    return summary


__all__ = ["DemoSummary", "StageSnapshot", "run_demo"]
