"""
Orbis CLI - Command line utilities for spatial contexts.
"""

from .cli import main

__all__ = ["main"]
