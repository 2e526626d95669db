"""Workflow commands understood by the GitHub Actions runner.

Commands are plain lines on stdout (``::group::title``); outputs are appended
to the file named by ``$GITHUB_OUTPUT``.
"""

import os
import sys
import uuid
from pathlib import Path
from typing import Mapping, TextIO


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _issue(command: str, message: str = "", stream: TextIO | None = None) -> None:
    target = stream or sys.stdout
    target.write(f"::{command}::{_escape_data(message)}\n")
    target.flush()


def start_group(title: str, stream: TextIO | None = None) -> None:
    _issue("group", title, stream)


def end_group(stream: TextIO | None = None) -> None:
    _issue("endgroup", "", stream)


def add_mask(value: str, stream: TextIO | None = None) -> None:
    if value:
        _issue("add-mask", value, stream)


def error(message: str, stream: TextIO | None = None) -> None:
    _issue("error", message, stream)


def warning(message: str, stream: TextIO | None = None) -> None:
    _issue("warning", message, stream)


def _format_output(name: str, value: str) -> str:
    if "\n" not in value and "\r" not in value:
        return f"{name}={value}\n"
    delimiter = f"ghadelimiter_{uuid.uuid4()}"
    return f"{name}<<{delimiter}\n{value}\n{delimiter}\n"


def set_output(name: str, value: str, environ: Mapping[str, str] | None = None) -> bool:
    """Append ``name=value`` to ``$GITHUB_OUTPUT``.

    Returns False when the variable is not set (running outside of Actions).
    """
    env = os.environ if environ is None else environ
    github_output = env.get("GITHUB_OUTPUT")
    if not github_output:
        return False

    with open(Path(github_output), "a", encoding="utf-8") as output_file:
        output_file.write(_format_output(name, value))
    return True
