# src/fxconv/adapters/console/prompter.py
"""
Console Prompter - Line-based Terminal I/O

Wraps terminal input/output into a blocking request/response call: ask() shows
a prompt and returns the next line typed by the user, verbatim.

Files that USE this module:
- fxconv.app (creates the Prompter bound to stdin/stdout)
- fxconv.application.session (all dialogue goes through the Prompter)
- tests.test_prompter, tests.test_session (scripted input)

Files that this module USES:
- fxconv.config (settings.clear_screen)
"""
from __future__ import annotations

import sys
from typing import Callable, Optional, TextIO

from fxconv.config import settings

CLEAR_SEQUENCE = "\033[2J\033[H"


class Prompter:
    """Blocking prompt over a pair of text streams."""

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        clear_screen: Optional[bool] = None,
    ):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.clear_screen = settings.clear_screen if clear_screen is None else clear_screen

    def ask(self, prompt_text: str) -> str:
        """
        Write prompt_text and block until one line of input arrives.

        Returns:
            The line without its trailing newline; no other trimming

        Raises:
            EOFError: If the input stream is closed
        """
        self.stdout.write(prompt_text)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError("input stream closed")
        return line[:-1] if line.endswith("\n") else line

    def say(self, text: str = "") -> None:
        self.stdout.write(f"{text}\n")
        self.stdout.flush()

    def clear(self) -> None:
        """Clear the terminal, only when enabled and writing to a TTY."""
        if not self.clear_screen:
            return
        isatty: Callable[[], bool] = getattr(self.stdout, "isatty", lambda: False)
        if isatty():
            self.stdout.write(CLEAR_SEQUENCE)
            self.stdout.flush()
