"""
Legacy student record store.

An ordered, linearly scanned list of `StudentRecord` entries behind the
legacy naming scheme (`insert_student_record`, `fetch_all_records`, ...).
Scores are expected to arrive already narrowed to single precision.

The store never raises for a missing id and never writes to the console;
each mutation returns a `RecordOutcome` and leaves reporting to the caller.
"""

from __future__ import annotations

from typing import List

from student_system.domain.models import RecordOutcome, StudentRecord


class LegacyStudentDatabase:
    """
    In-memory record store with CRUD-by-id operations.

    Ids are not unique. `delete_student_record` removes every match while
    `update_student_record` only touches the first one in storage order.
    """

    def __init__(self) -> None:
        self._records: List[StudentRecord] = []

    def insert_student_record(
        self, student_id: int, full_name: str, academic_score: float
    ) -> RecordOutcome:
        """Append a record. Existing records with the same id are left alone."""
        self._records.append(
            StudentRecord(
                student_id=student_id,
                full_name=full_name,
                academic_score=academic_score,
            )
        )
        return RecordOutcome.ADDED

    def delete_student_record(self, student_id: int) -> RecordOutcome:
        """Remove all records with `student_id`, keeping the order of the rest."""
        kept = [record for record in self._records if record.student_id != student_id]
        if len(kept) == len(self._records):
            return RecordOutcome.NOT_FOUND
        self._records = kept
        return RecordOutcome.REMOVED

    def update_student_record(
        self, student_id: int, full_name: str, academic_score: float
    ) -> RecordOutcome:
        """Rewrite name and score of the first record with `student_id`."""
        for record in self._records:
            if record.student_id == student_id:
                record.full_name = full_name
                record.academic_score = academic_score
                return RecordOutcome.UPDATED
        return RecordOutcome.NOT_FOUND

    def get_record_count(self) -> int:
        return len(self._records)

    def fetch_all_records(self) -> List[str]:
        """Snapshot of display lines, one per record, in storage order."""
        return [record.describe() for record in self._records]


__all__ = ["LegacyStudentDatabase"]
