"""Program identity shown in help output and ``--version``."""

from __future__ import annotations

PROGRAM_NAME: str = "taskschema"

__version__: str = "0.1.0"
