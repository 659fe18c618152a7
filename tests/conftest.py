"""
Fixtures and test configuration for the test suite.
"""

from typing import List

import httpx
import pytest

from src.logging.setup import setup_logging
from fakes import UPSTREAM_RESULTS

setup_logging("DEBUG")


@pytest.fixture
def upstream_results():
    """The canned VexDB results, keyed by endpoint then team."""
    return UPSTREAM_RESULTS


@pytest.fixture
def recorded_requests() -> List[httpx.Request]:
    return []
