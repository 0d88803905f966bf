"""Progress and failure reporting to the host automation system.

Outside GitHub Actions these are plain log calls. Under Actions,
``set_failed`` also emits an ``::error::`` workflow command so the step is
annotated with the failure message.
"""
import logging
import os
import sys
from typing import Optional, TextIO


logger = logging.getLogger(__name__)


def _escape_data(message: str) -> str:
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def running_in_github_actions() -> bool:
    return os.getenv("GITHUB_ACTIONS", "").lower() == "true"


def info(message: str) -> None:
    logger.info(message)


def set_failed(message: str, stream: Optional[TextIO] = None) -> None:
    """Log the failure and annotate the workflow step when under Actions."""
    logger.error(message)
    if running_in_github_actions():
        out = stream or sys.stdout
        out.write(f"::error::{_escape_data(message)}\n")
        out.flush()
