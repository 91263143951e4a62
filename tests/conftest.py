"""
Pytest configuration and fixtures for tests
"""
import os
import sys

import pytest

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.state import JudgeProfile, StageProfile, StatVector


@pytest.fixture
def fenrir_stats():
    """Fenrir's template stats."""
    return StatVector(cute=48, eerie=42, majestic=56, impact=54)


@pytest.fixture
def impact_judge():
    return JudgeProfile("wild_focus", "Impact judge", "", {"impact": 1.0, "cute": 0.3})


@pytest.fixture
def plain_stage():
    return StageProfile("standard", "Standard stage", "", {})
