"""API module for larc commands.

Functions defined here are the single source of truth for CLI commands.
"""

__all__ = []
