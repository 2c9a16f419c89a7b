"""
Pytest configuration for the lazy list tests.

Puts the project root on the Python path so the tests can import lazy,
sequences, utils, models and app directly.
"""

import sys
from pathlib import Path

parent_dir = Path(__file__).parent.parent
if str(parent_dir) not in sys.path:
    sys.path.insert(0, str(parent_dir))

import pytest

from utils import clear_performance_metrics


class CallCounter:
    """Wraps a function and counts how often it is called"""

    def __init__(self, fn):
        self.fn = fn
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.fn(*args)


@pytest.fixture
def counted():
    """Factory fixture: counted(fn) returns a call-counting wrapper"""
    return CallCounter


@pytest.fixture(autouse=True)
def reset_performance_metrics():
    clear_performance_metrics()
    yield
