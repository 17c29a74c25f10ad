"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru messages (DEBUG and above) emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
