"""
Systems package for the Student System adapter demo.

Re-exports the modern interface and its legacy-backed implementation so
client code can import from `student_system.systems` directly.
"""

from student_system.systems.abstract import (
    AbstractStudentSystem,
    ModernStudentSystem,
)
from student_system.systems.adapter import StudentSystemAdapter

__all__ = [
    # Abstracts
    "AbstractStudentSystem",
    "ModernStudentSystem",
    # Concrete systems
    "StudentSystemAdapter",
]
