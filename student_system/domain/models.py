"""
Domain models for the Student System adapter demo.

`StudentRecord` is the row kept by the legacy store. `RecordOutcome` is what
every store mutation reports back, so "not found" can be inspected by callers
instead of being buried in console output.
"""
from __future__ import annotations

import enum

from pydantic import BaseModel, Field


class RecordOutcome(str, enum.Enum):
    """Result of a single store mutation."""

    ADDED = "added"
    REMOVED = "removed"
    UPDATED = "updated"
    NOT_FOUND = "not_found"

    @property
    def found(self) -> bool:
        return self is not RecordOutcome.NOT_FOUND


class StudentRecord(BaseModel):
    """
    Representation of a single student entry in the legacy store.

    Records are mutable: an update rewrites `full_name` and `academic_score`
    in place and keeps `student_id`.
    """

    student_id: int = Field(..., description="Student identifier; not unique.")
    full_name: str = Field(..., description="Display name.")
    academic_score: float = Field(..., description="Single-precision score value.")

    model_config = {
        "frozen": False,
        "validate_assignment": True,
        "arbitrary_types_allowed": False,
    }

    def describe(self) -> str:
        """Legacy display line, e.g. ``ID: 1001, Name: John Smith, Score: 3.750000``."""
        return (
            f"ID: {self.student_id}, Name: {self.full_name}, "
            f"Score: {self.academic_score:.6f}"
        )


__all__ = ["RecordOutcome", "StudentRecord"]
