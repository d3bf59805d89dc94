"""
Test Configuration and Fixtures

Environment setup MUST happen before any application import: the logging
config reads TEST_LOG_DIR and the settings at import time.
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ['SERVICE_NAME'] = 'event-status-test'


_early_setup_test_environment()

from datetime import datetime, timezone  # noqa: E402

import pytest  # noqa: E402


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
