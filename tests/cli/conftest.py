"""CLI test fixtures."""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop the stderr sink the CLI installs on the runner's stream."""
    yield
    logger.remove()
