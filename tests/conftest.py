import pytest
from loguru import logger


@pytest.fixture
def log_messages():
    """Collect loguru records emitted during a test."""
    messages: list = []
    handler_id = logger.add(lambda m: messages.append(m.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)
