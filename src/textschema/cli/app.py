from typing import Optional

import typer
from loguru import logger

from textschema.config import get_config
from textschema.utils import setup_logging


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:  # pragma: no cover
        import textschema

        typer.echo(f"textschema version: {textschema.__version__}")
        raise typer.Exit()


def log_level_callback(value: Optional[str]) -> Optional[str]:
    """Reject log levels loguru does not know."""
    if value is None:
        return None
    try:
        logger.level(value.upper())
    except ValueError:
        raise typer.BadParameter(f"Unknown log level: {value}")
    return value.upper()


app = typer.Typer(name="textschema")


@app.callback()
def app_callback(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level (DEBUG, INFO, WARNING, ERROR).",
        envvar="TEXTSCHEMA_LOG_LEVEL",
        callback=log_level_callback,
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """textschema - compile and try textual pattern files."""
    setup_logging(log_level or get_config().log_level)
