"""Pytest configuration for tests.

No sys.path hacks - tests import from the installed pkgtemplate package.
"""

import io
from pathlib import Path
from typing import List

import pytest


def template_text(*lines: str) -> str:
    """Join template lines the way they appear in a file."""
    return "\n".join(lines) + "\n"


@pytest.fixture
def as_stream():
    """Build a UTF-8 byte stream from template lines."""
    def _as_stream(*lines: str) -> io.BytesIO:
        return io.BytesIO(template_text(*lines).encode("utf-8"))
    return _as_stream


@pytest.fixture
def write_template(tmp_path):
    """Write template lines to tmp_path/<relative> and return the path."""
    def _write(relative: str, *lines: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(template_text(*lines), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def complete_lines() -> List[str]:
    """A minimal valid "type file" template."""
    return [
        "type file",
        "id MyPackage",
        "version 1.2.3",
        "authors Alice, Bob",
        "description A sample package",
    ]
