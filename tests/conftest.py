"""Shared fixtures for calendar export tests."""

from datetime import datetime, timezone

import pytest

from records import Assignment, ClassInfo


FIXED_NOW = datetime(2024, 2, 20, 8, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock that always returns the same instant."""
    return lambda: FIXED_NOW


@pytest.fixture
def classes() -> list[ClassInfo]:
    return [
        ClassInfo(id="101", title="CS101", description="Intro to Programming"),
        ClassInfo(id="202", title="MA202", description="Linear Algebra"),
    ]


@pytest.fixture
def assignment() -> Assignment:
    return Assignment(
        id="7",
        class_id="101",
        title="HW1",
        due_date="2024-03-01T00:00:00Z",
        type="ASM",
        group_type="IND",
    )
