"""Pytest configuration and fixtures for Horologe tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the parent directory to sys.path so horologe can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from horologe.clock import FixedClock  # noqa: E402


@pytest.fixture
def fixed_clock() -> FixedClock:
    """A clock frozen at 2024-12-28T14:30:00Z."""
    return FixedClock(1_735_396_200)
