"""
Modern student system interface.

Client code depends only on `ModernStudentSystem`. Implementations (the
adapter over the legacy store, or a fake in tests) satisfy it structurally;
`AbstractStudentSystem` is available for class-based implementations that
prefer explicit inheritance.
"""

from __future__ import annotations

import abc
from typing import List, Protocol, runtime_checkable

from student_system.domain.models import RecordOutcome


@runtime_checkable
class ModernStudentSystem(Protocol):
    """
    Common interface client code talks to.

    Scores are accepted as regular (double-precision) floats. Implementations
    may store them at lower precision.
    """

    def add_student(self, student_id: int, name: str, gpa: float) -> RecordOutcome:
        """
        Register a student.

        Parameters
        ----------
        student_id : int
            Student identifier. Uniqueness is not checked.
        name : str
            Display name.
        gpa : float
            Grade point average.

        Returns
        -------
        RecordOutcome
            Always ``RecordOutcome.ADDED`` for the legacy-backed system.
        """
        ...

    def remove_student(self, student_id: int) -> RecordOutcome:
        """Remove a student; ``RecordOutcome.NOT_FOUND`` when absent."""
        ...

    def update_student_details(
        self, student_id: int, name: str, gpa: float
    ) -> RecordOutcome:
        """Replace name and GPA; ``RecordOutcome.NOT_FOUND`` when absent."""
        ...

    def get_all_students_info(self) -> List[str]:
        """Display lines for every student, in storage order."""
        ...

    def get_total_students(self) -> int:
        """Number of students currently stored."""
        ...


class AbstractStudentSystem(abc.ABC):
    """
    Optional ABC helper for class-based implementations.
    """

    @abc.abstractmethod
    def add_student(self, student_id: int, name: str, gpa: float) -> RecordOutcome:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def remove_student(self, student_id: int) -> RecordOutcome:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def update_student_details(
        self, student_id: int, name: str, gpa: float
    ) -> RecordOutcome:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def get_all_students_info(self) -> List[str]:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def get_total_students(self) -> int:  # pragma: no cover - interface only
        raise NotImplementedError


__all__ = [
    "ModernStudentSystem",
    "AbstractStudentSystem",
]
