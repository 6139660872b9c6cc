"""
Pytest configuration for the Student System adapter demo.

Provides fixtures for:
- Fresh store and adapter instances
- An in-memory rich console for output assertions
- Settings and logging isolation
"""

from __future__ import annotations

import io
import logging
from typing import Generator

import pytest
from rich.console import Console

from student_system.config import Settings, get_settings
from student_system.legacy.database import LegacyStudentDatabase
from student_system.systems.adapter import StudentSystemAdapter


@pytest.fixture
def store() -> LegacyStudentDatabase:
    """Empty legacy store."""
    return LegacyStudentDatabase()


@pytest.fixture
def adapter() -> StudentSystemAdapter:
    """Adapter over its own empty legacy store."""
    return StudentSystemAdapter()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """
    Console writing to an in-memory buffer.

    Wide enough that no record line is wrapped.
    """
    return Console(file=output, width=200, color_system=None)


@pytest.fixture
def test_settings() -> Settings:
    return Settings(app_env="test", log_level="DEBUG", log_json=False)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Drop the cached Settings so env overrides in one test don't leak."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def restore_root_logging() -> Generator[None, None, None]:
    """
    Restore root handlers and level after code that calls configure_logging.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    try:
        yield
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
