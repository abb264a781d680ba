"""Shared pytest fixtures and configuration for the taskschema test suite.

Guidelines
----------
* Help output is captured through a list-backed sink, never stdout.
* Tests pass an explicit ``environ`` so that ``TASKSCHEMA_*`` variables
  of the developer's shell cannot leak in.
"""

from __future__ import annotations

import pytest


class CapturingSink:
    """LineSink that records every written line."""

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, text: str = "") -> None:
        self.lines.append(text)


@pytest.fixture
def sink() -> CapturingSink:
    return CapturingSink()
