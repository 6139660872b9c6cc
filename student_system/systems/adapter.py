"""
Adapter exposing the legacy student store through the modern interface.

Each call is translated one to one: method names are mapped onto the legacy
scheme and GPAs are narrowed to single precision on the way in. Outcomes and
display lines come back untouched.
"""

from __future__ import annotations

from typing import List

from student_system.domain.models import RecordOutcome
from student_system.legacy.database import LegacyStudentDatabase
from student_system.systems.abstract import AbstractStudentSystem
from student_system.utils.precision import to_single_precision


class StudentSystemAdapter(AbstractStudentSystem):
    """
    Owns a private `LegacyStudentDatabase` for its whole lifetime.

    The store is created here and never handed out through the modern
    interface, so it cannot be shared or outlive the adapter.
    """

    def __init__(self) -> None:
        self._legacy_system = LegacyStudentDatabase()

    @property
    def legacy_system(self) -> LegacyStudentDatabase:
        """Backing store, for inspection in tests."""
        return self._legacy_system

    def add_student(self, student_id: int, name: str, gpa: float) -> RecordOutcome:
        academic_score = to_single_precision(gpa)
        return self._legacy_system.insert_student_record(student_id, name, academic_score)

    def remove_student(self, student_id: int) -> RecordOutcome:
        return self._legacy_system.delete_student_record(student_id)

    def update_student_details(
        self, student_id: int, name: str, gpa: float
    ) -> RecordOutcome:
        academic_score = to_single_precision(gpa)
        return self._legacy_system.update_student_record(student_id, name, academic_score)

    def get_all_students_info(self) -> List[str]:
        return self._legacy_system.fetch_all_records()

    def get_total_students(self) -> int:
        return self._legacy_system.get_record_count()


__all__ = ["StudentSystemAdapter"]
