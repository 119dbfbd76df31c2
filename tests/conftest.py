"""Pytest configuration and fixtures for gregorian tests."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterator

import pytest

# Add the parent directory to sys.path so gregorian can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gregorian.clock import override_current_year  # noqa: E402

FIXED_YEAR = 2020


@pytest.fixture
def fixed_year() -> Iterator[int]:
    """Pin the current year to 2020 for the duration of a test."""
    with override_current_year(FIXED_YEAR):
        yield FIXED_YEAR
