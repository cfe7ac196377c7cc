# tests/test_prompter.py
"""
Prompter Tests - Unit Tests for Line-based Terminal I/O

Files that USE this module:
- pytest (test runner executes these tests)

Files that this module USES:
- fxconv.adapters.console.prompter (Prompter for testing)
"""
import io

import pytest
from unittest.mock import Mock

from fxconv.adapters.console.prompter import CLEAR_SEQUENCE, Prompter


class TestPrompter:
    def test_ask_writes_prompt_and_returns_line(self):
        stdout = io.StringIO()
        prompter = Prompter(stdin=io.StringIO("100\n"), stdout=stdout, clear_screen=False)

        assert prompter.ask("> Amount: ") == "100"
        assert stdout.getvalue() == "> Amount: "

    def test_ask_does_not_trim(self):
        prompter = Prompter(stdin=io.StringIO("  usd  \n"), stdout=io.StringIO(), clear_screen=False)
        assert prompter.ask("? ") == "  usd  "

    def test_ask_last_line_without_newline(self):
        prompter = Prompter(stdin=io.StringIO("eur"), stdout=io.StringIO(), clear_screen=False)
        assert prompter.ask("? ") == "eur"

    def test_ask_on_closed_input(self):
        prompter = Prompter(stdin=io.StringIO(""), stdout=io.StringIO(), clear_screen=False)
        with pytest.raises(EOFError):
            prompter.ask("? ")

    def test_say(self):
        stdout = io.StringIO()
        prompter = Prompter(stdin=io.StringIO(), stdout=stdout, clear_screen=False)

        prompter.say("hello")
        prompter.say()

        assert stdout.getvalue() == "hello\n\n"

    def test_clear_skipped_when_not_a_tty(self):
        stdout = io.StringIO()
        Prompter(stdin=io.StringIO(), stdout=stdout, clear_screen=True).clear()
        assert stdout.getvalue() == ""

    def test_clear_on_tty(self):
        stdout = Mock()
        stdout.isatty.return_value = True

        Prompter(stdin=io.StringIO(), stdout=stdout, clear_screen=True).clear()

        stdout.write.assert_called_once_with(CLEAR_SEQUENCE)

    def test_clear_disabled(self):
        stdout = Mock()
        stdout.isatty.return_value = True

        Prompter(stdin=io.StringIO(), stdout=stdout, clear_screen=False).clear()

        stdout.write.assert_not_called()
