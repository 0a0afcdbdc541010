"""Tests for logging setup."""

from loguru import logger

from textschema.utils import setup_logging


def test_setup_logging_filters_by_level(capsys):
    setup_logging("WARNING")
    try:
        logger.info("hidden message")
        logger.warning("shown message")
        err = capsys.readouterr().err
    finally:
        logger.remove()

    assert "shown message" in err
    assert "hidden message" not in err
