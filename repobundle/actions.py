# repobundle/actions.py

"""
GitHub Actions host integration.

Helpers to read action inputs from the environment, publish outputs through
the ``$GITHUB_OUTPUT`` file, and turn log records into workflow commands
(``::warning::...``) so that warnings and errors are annotated in the run.
"""


from __future__ import annotations

import logging
import os
import sys
import uuid
from typing import TextIO

from repobundle.errors import OutputError


def in_actions() -> bool:
    return os.environ.get("GITHUB_ACTIONS") == "true"


def get_input(name: str, default: str | None = None) -> str | None:
    """
    Return the value of an action input.

    The runner exposes ``with:`` inputs as ``INPUT_<NAME>`` environment
    variables, upper-cased with spaces replaced by underscores. Values are
    stripped; a missing input gives ``default``.
    """

    value = os.environ.get(f"INPUT_{name.replace(' ', '_').upper()}")
    if value is None:
        return default
    return value.strip()


def escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def set_output(name: str, value: str, *, stream: TextIO | None = None) -> None:
    """
    Publish an action output.

    Outputs are appended to the file named by ``$GITHUB_OUTPUT`` using the
    multiline ``name<<delimiter`` syntax. Outside of a runner, the value is
    written to ``stream`` (stdout by default).

    Raises
    ------
    OutputError
        If the output file cannot be written.
    """

    output_file = os.environ.get("GITHUB_OUTPUT")
    if not output_file:
        (stream or sys.stdout).write(value)
        return

    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    if delimiter in name or delimiter in value:
        raise OutputError(f"Output value for '{name}' contains the delimiter")
    try:
        with open(output_file, "a", encoding="utf-8", newline="\n") as fh:
            fh.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
    except OSError as e:
        raise OutputError(f"Could not write output '{name}' to '{output_file}': {e}") from e


class WorkflowCommandFormatter(logging.Formatter):
    """Format log records as GitHub Actions workflow commands."""

    COMMANDS = {
        logging.DEBUG: "debug",
        logging.WARNING: "warning",
        logging.ERROR: "error",
        logging.CRITICAL: "error",
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        command = self.COMMANDS.get(record.levelno)
        if command is None:
            return message
        return f"::{command}::{escape_data(message)}"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single handler to the package logger and return it."""
    if in_actions():
        # Workflow commands are only parsed on stdout.
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(WorkflowCommandFormatter("%(message)s"))
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    logger = logging.getLogger("repobundle")
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
