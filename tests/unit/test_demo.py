from __future__ import annotations

import io

from rich.console import Console

from student_system.demo import INITIAL_STUDENTS, DemoSummary, run_demo
from student_system.domain.models import RecordOutcome
from student_system.reporter import print_summary
from student_system.systems import StudentSystemAdapter

EXPECTED_TOTALS = [3, 2, 2]


class _DictBackedSystem:
    """Modern-interface fake backed by a dict, to show run_demo is store-agnostic."""

    def __init__(self) -> None:
        self.students: dict[int, tuple[str, float]] = {}

    def add_student(self, student_id, name, gpa):
        self.students[student_id] = (name, gpa)
        return RecordOutcome.ADDED

    def remove_student(self, student_id):
        if self.students.pop(student_id, None) is None:
            return RecordOutcome.NOT_FOUND
        return RecordOutcome.REMOVED

    def update_student_details(self, student_id, name, gpa):
        if student_id not in self.students:
            return RecordOutcome.NOT_FOUND
        self.students[student_id] = (name, gpa)
        return RecordOutcome.UPDATED

    def get_all_students_info(self):
        return [f"{sid}:{name}" for sid, (name, _) in self.students.items()]

    def get_total_students(self):
        return len(self.students)


def test_demo_stage_totals(console: Console):
    summary = run_demo(console=console)

    assert [stage.total for stage in summary.stages] == EXPECTED_TOTALS
    assert [stage.label for stage in summary.stages] == [
        "registered",
        "after removal",
        "after update",
    ]


def test_demo_final_roster(console: Console):
    summary = run_demo(console=console)

    assert summary.stages[1].records == [
        "ID: 1001, Name: John Smith, Score: 3.750000",
        "ID: 1003, Name: Michael Brown, Score: 3.450000",
    ]
    assert summary.final.records == [
        "ID: 1001, Name: John Smith, Score: 3.750000",
        "ID: 1003, Name: Michael Brown Jr., Score: 3.850000",
    ]


def test_demo_uses_supplied_system(console: Console):
    adapter = StudentSystemAdapter()

    run_demo(system=adapter, console=console)

    assert adapter.get_total_students() == 2


def test_demo_runs_against_any_modern_system(console: Console):
    system = _DictBackedSystem()

    summary = run_demo(system=system, console=console)

    assert summary.final.records == ["1001:John Smith", "1003:Michael Brown Jr."]
    assert len(INITIAL_STUDENTS) == EXPECTED_TOTALS[0]


def test_demo_output_sections(console: Console, output: io.StringIO):
    run_demo(console=console)
    text = output.getvalue()

    for heading in (
        "Welcome to Student Management System",
        "Student Records:",
        "Removing student with ID 1002...",
        "Updated Student Records:",
        "Updating details for student with ID 1003...",
        "Final Student Records:",
    ):
        assert heading in text
    assert text.count("Total Students:") == 3
    assert "Total Students: 3" in text


def test_print_summary_renders_each_stage(console: Console, output: io.StringIO):
    summary = run_demo(console=Console(file=io.StringIO()))

    print_summary(summary, console)
    text = output.getvalue()

    assert "Student Management Demo" in text
    assert "after removal" in text
    assert "Michael Brown Jr." in text


def test_print_summary_handles_empty(console: Console, output: io.StringIO):
    print_summary(DemoSummary(), console)

    assert "No stages to display." in output.getvalue()
