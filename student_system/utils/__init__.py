"""
Utilities package for the Student System adapter demo.

Exports shared helpers for logging and score narrowing.
Keep this package lightweight and free of record-store logic.
"""

from student_system.utils.logging import configure_logging, get_logger
from student_system.utils.precision import to_single_precision

__all__ = [
    "configure_logging",
    "get_logger",
    "to_single_precision",
]
