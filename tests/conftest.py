"""Common test fixtures."""

import pytest
from loguru import logger

from textschema.combinators import letters
from textschema.config import get_config


@pytest.fixture(autouse=True)
def fresh_config():
    """Reload settings from the environment for every test."""
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def env():
    """Every reference used in the tests bound to a run of letters."""
    return {"expr": letters, "op": letters, "x": letters, "name": letters}


@pytest.fixture
def declaration_schema():
    return "$expr is the $op of $expr and $expr"


@pytest.fixture
def schema_file(tmp_path):
    """A schema file with a blank line between two schemas."""
    path = tmp_path / "declarations.txt"
    path.write_text(
        "  $expr is the $op of $expr and $expr  \n"
        "\n"
        "let $expr be $expr\n",
        encoding="utf-8",
    )
    return path
