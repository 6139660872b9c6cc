"""
Student System - the Adapter pattern over a legacy student record store.

A legacy in-memory store with its own naming scheme and single-precision
scores is wrapped by an adapter that exposes a modern interface:

- `LegacyStudentDatabase`: the linear-scan store (insert, delete, update, dump)
- `StudentSystemAdapter`: modern add/remove/update/list/count over it
- `StudentManagementClient`: client code that only knows the modern interface
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from student_system.client import RosterSnapshot, StudentManagementClient
from student_system.config import Settings, get_settings
from student_system.demo import DemoSummary, run_demo
from student_system.domain.models import RecordOutcome, StudentRecord
from student_system.legacy.database import LegacyStudentDatabase
from student_system.systems.abstract import AbstractStudentSystem, ModernStudentSystem
from student_system.systems.adapter import StudentSystemAdapter
from student_system.utils.logging import configure_logging, get_logger
from student_system.utils.precision import to_single_precision

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "RecordOutcome",
    "StudentRecord",
    # Store and adapter
    "LegacyStudentDatabase",
    "ModernStudentSystem",
    "AbstractStudentSystem",
    "StudentSystemAdapter",
    # Client and demo
    "StudentManagementClient",
    "RosterSnapshot",
    "DemoSummary",
    "run_demo",
    # Utilities
    "configure_logging",
    "get_logger",
    "to_single_precision",
]
