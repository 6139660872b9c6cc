"""
Legacy package: the record store whose interface the adapter hides.

Client code should not import from here; go through
`student_system.systems` instead.
"""

from student_system.legacy.database import LegacyStudentDatabase

__all__ = ["LegacyStudentDatabase"]
