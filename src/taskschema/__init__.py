"""taskschema — declarative task definitions with CLI resolution and help.

Tasks declare typed named and positional parameters once; the same
schema drives command-line resolution and help rendering.
"""

from taskschema.version import __version__

__all__: list[str] = ["__version__"]
