"""API module for favicon injection.

Functions defined here are the single source of truth for both the library
surface and the CLI commands.
"""

__all__ = []
