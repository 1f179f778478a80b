"""
Pytest configuration and fixtures for all tests.
"""

import os
import pytest

# Set up test environment variables before importing any modules
os.environ.setdefault('LOG_LEVEL', 'INFO')
os.environ.setdefault('LOG_REJECTIONS', 'false')

from emailcheck.config import settings


@pytest.fixture
def log_rejections():
    """Turn on rule-level rejection logging for one test."""
    previous = settings.LOG_REJECTIONS
    settings.LOG_REJECTIONS = True
    yield
    settings.LOG_REJECTIONS = previous
