# src/fxconv/adapters/console/__init__.py
"""
Console Adapters - Terminal Interaction

This package contains the line-based prompter used by the session.
"""

from fxconv.adapters.console.prompter import Prompter

__all__ = ["Prompter"]
