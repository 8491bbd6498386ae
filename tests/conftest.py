"""
Shared fixtures for the strvalidator test suite.
"""

import logging

import pytest

from strvalidator import reset_messages


@pytest.fixture(autouse=True)
def default_messages():
    """Every test starts and ends with the English catalog installed."""
    reset_messages()
    yield
    reset_messages()
    logging.getLogger("strvalidator").setLevel(logging.NOTSET)
