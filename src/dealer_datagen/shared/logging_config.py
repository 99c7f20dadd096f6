"""Logging configuration for the dealer data generator."""
import logging
import sys
from typing import TextIO


def configure_logging(
    level: str = "INFO", structured: bool = False, stream: TextIO | None = None
) -> None:
    """Configure root logging for CLI and embedded use (stdout by default)."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        # Structured entries are already JSON
        format="%(message)s" if structured else "%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=stream or sys.stdout,
        force=True,
    )

    # pandas may pull in numexpr, which logs thread setup at INFO
    logging.getLogger("numexpr").setLevel(logging.WARNING)
