"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of Rich so that
help and ``--version`` keep working when Rich is not installed.

* :data:`console` — stderr proxy for status and error messages (Rich
  markup allowed).
* :class:`ConsoleSink` — stdout :class:`~taskschema.core.protocols.LineSink`
  for help text, which is printed verbatim.
"""

from __future__ import annotations

import sys
from typing import Any

from taskschema.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			print(*objects, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()


class ConsoleSink:
	"""Line sink writing help text to stdout.

	Lines are written straight to the Rich console's ``file``: help text
	carries square brackets (``[GLOBAL OPTIONS]``, ``[src]``) and column
	tabs, which ``Console.print`` would read as markup and expand.
	"""

	def __init__(self) -> None:
		try:
			self._rich_console: Any = get_rich_console(stderr=False)
		except EnvironmentError:
			self._rich_console = None

	def write_line(self, text: str = "") -> None:
		if self._rich_console is None:
			print(text)
			return
		self._rich_console.file.write(text + "\n")
