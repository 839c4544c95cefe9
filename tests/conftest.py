# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable test data for all tests.
"""

import os
import sys
import tempfile
from datetime import datetime
from pathlib import Path

import pytest

# Keep test runs from writing log files into the working tree
os.environ.setdefault("VASA_LOG_DIR", str(Path(tempfile.gettempdir()) / "vasa-test-logs"))

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from vasa.models import BlockCategory, Invoice, TimeBlock
from vasa.core.workspace import Workspace


FIXED_NOW = datetime(2025, 6, 5, 12, 0)


# ==================== Clock Fixtures ====================

@pytest.fixture
def fixed_now():
    """A fixed 'now': noon on 2025-06-05."""
    return FIXED_NOW


@pytest.fixture
def clock(fixed_now):
    """Clock callable returning the fixed time."""
    return lambda: fixed_now


# ==================== Planner Fixtures ====================

@pytest.fixture
def standup():
    """Block A: 9:00-10:00 Standup."""
    return TimeBlock(start=9 * 60, end=10 * 60, label="Standup",
                     category=BlockCategory.MEETING, id="block-a")


@pytest.fixture
def morning_blocks(standup):
    """A day with a 7:00-8:00 task and the standup."""
    early = TimeBlock(start=7 * 60, end=8 * 60, label="Email", id="block-early")
    return [early, standup]


# ==================== Invoice Fixtures ====================

@pytest.fixture
def unpaid_invoice():
    return Invoice(client="Alpha Co.", amount=2500, due_date="2025-06-10", id="inv-1")


@pytest.fixture
def paid_invoice():
    return Invoice(client="Beta Ltd.", amount=1300, due_date="2025-05-28", is_paid=True, id="inv-2")


# ==================== Workspace Fixtures ====================

@pytest.fixture
def workspace(clock):
    """An empty workspace on the fixed clock."""
    return Workspace(clock=clock)


@pytest.fixture
def seeded_workspace(clock):
    """A workspace loaded with the demo records."""
    ws = Workspace(clock=clock)
    ws.load_seed()
    return ws


@pytest.fixture
def client_form():
    return {
        'name': 'Gamma Studio',
        'email': 'team@gamma.studio',
        'status': 'active',
        'projects': 'Brand refresh',
        'preferences': 'Email only',
        'billing': 'Net 30',
    }


@pytest.fixture
def task_form():
    return {
        'title': 'Write copy',
        'description': 'Homepage and about page',
        'due_date': '2025-06-05',
        'priority': 'High',
        'status': 'To Do',
        'client': 'Gamma Studio',
        'subtasks': ['Homepage', '', 'About'],
    }
