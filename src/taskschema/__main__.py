"""Allow ``python -m taskschema`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m taskschema`` behaves identically to the ``taskschema``
console script.
"""

from __future__ import annotations

from taskschema.cli.app import cli

if __name__ == "__main__":
    cli()
