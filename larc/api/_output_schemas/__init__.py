"""Output schemas for API commands.

Importing this package registers every schema with the schema registry.
"""

from . import archive, config, log

__all__ = ["archive", "config", "log"]
