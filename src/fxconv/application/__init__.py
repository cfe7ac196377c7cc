# src/fxconv/application/__init__.py
"""
Application Layer - Use Cases and Services

This package contains the services that orchestrate a converter session.
I/O happens only through adapters passed in by the composition root.
"""

from fxconv.application.history import HistoryStore
from fxconv.application.session import SessionController, SessionState

__all__ = [
    "HistoryStore",
    "SessionController",
    "SessionState",
]
