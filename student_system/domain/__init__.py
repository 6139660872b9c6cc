"""
Domain package for the Student System adapter demo.

Exports the record model and the mutation outcome shared by the legacy store,
the adapter and the client.
"""

from student_system.domain.models import RecordOutcome, StudentRecord

__all__ = [
    "RecordOutcome",
    "StudentRecord",
]
