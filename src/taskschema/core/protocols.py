"""Protocols (interfaces) consumed by the core layer.

Core code depends ONLY on these protocols — never on concrete output
implementations — so the help printer can be driven against a Rich
console in production and a plain list in tests.
"""

from __future__ import annotations

from typing import Protocol


class LineSink(Protocol):
    """Append-only, line-oriented text output.

    Any object that implements :meth:`write_line` satisfies this
    protocol structurally (no explicit inheritance required).
    """

    def write_line(self, text: str = "") -> None:
        """Emit *text* followed by a line break.

        *text* is plain text: no markup is interpreted and no trailing
        whitespace is stripped.
        """
        ...  # pragma: no cover
