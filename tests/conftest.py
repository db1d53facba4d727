"""
Pytest configuration for openstruct tests.
"""
import logging
import sys
from pathlib import Path

import pytest

# Add tests directory to Python path so the util module can be imported
sys.path.insert(0, str(Path(__file__).parent))


@pytest.fixture
def debug_log(caplog):
    caplog.set_level(logging.DEBUG, logger="openstruct")
    return caplog
