# src/fxconv/application/session.py
"""
Session Controller - Conversion Cycle and Menu

This module drives the interactive session: collect an amount and a currency
pair, convert through the rate provider, show and record the result, then
offer a new conversion, the history, or exit. The cycle repeats in an
explicit loop until the user leaves.

Files that USE this module:
- fxconv.app (runs the session)
- tests.test_session (scripted sessions)

Files that this module USES:
- fxconv.adapters.console.prompter (Prompter for all terminal I/O)
- fxconv.adapters.formatting.formatter (message text)
- fxconv.adapters.providers.base (RateProvider interface)
- fxconv.application.history (HistoryStore)
- fxconv.domain (ConversionRecord, errors, popular currencies)
- fxconv.shared.validators (amount parsing, code normalisation)
"""
from __future__ import annotations

import enum
import logging
import time
from typing import Callable, Optional

from fxconv.adapters.console.prompter import Prompter
from fxconv.adapters.formatting import formatter as fmt
from fxconv.adapters.providers.base import RateProvider
from fxconv.application.history import HistoryStore
from fxconv.config import settings
from fxconv.domain.errors import ConversionError, InputError
from fxconv.domain.models import ConversionRecord, is_popular
from fxconv.shared.validators import normalize_currency_code, parse_amount

logger = logging.getLogger(__name__)


class SessionState(enum.Enum):
    PROMPTING = "prompting"
    CONVERTING = "converting"
    DISPLAYING = "displaying"
    MENU_CHOICE = "menu_choice"
    TERMINATED = "terminated"


class SessionController:
    """Runs conversion cycles until the user chooses to exit."""

    def __init__(
        self,
        prompter: Prompter,
        provider: RateProvider,
        history: Optional[HistoryStore] = None,
        sleep: Callable[[float], None] = time.sleep,
        retry_delay: Optional[float] = None,
    ):
        """
        Args:
            prompter: Terminal I/O
            provider: Rate provider used for every conversion
            history: History store (a fresh one per session by default)
            sleep: Pause function used after invalid input
            retry_delay: Seconds to pause after invalid input
                         (defaults to settings.retry_delay_seconds)
        """
        self.prompter = prompter
        self.provider = provider
        self.history = history if history is not None else HistoryStore()
        self.sleep = sleep
        self.retry_delay = settings.retry_delay_seconds if retry_delay is None else retry_delay
        self.state = SessionState.PROMPTING

    def run(self) -> None:
        """Run cycles until the user exits."""
        logger.info("Session started")
        while self.state is not SessionState.TERMINATED:
            self.state = self.run_cycle()
        logger.info("Session ended after %d successful conversion(s)", self.history.count())

    def run_cycle(self) -> SessionState:
        """
        Run one conversion cycle.

        Returns:
            PROMPTING to start another cycle, TERMINATED to stop
        """
        self.state = SessionState.PROMPTING
        self.prompter.clear()
        self.prompter.say(fmt.banner())
        if self.history.count() > 0:
            self.prompter.say(fmt.records_in_memory(self.history.count()))

        raw_amount = self.prompter.ask(fmt.PROMPT_AMOUNT)
        try:
            amount = parse_amount(raw_amount)
        except InputError as e:
            logger.info("Rejected amount input: %s", e)
            self.prompter.say(fmt.INVALID_AMOUNT)
            self.sleep(self.retry_delay)
            return SessionState.PROMPTING

        source = normalize_currency_code(self.prompter.ask(fmt.PROMPT_SOURCE))
        target = normalize_currency_code(self.prompter.ask(fmt.PROMPT_TARGET))

        if is_popular(target):
            self.prompter.say(fmt.popular_note(target))

        self.state = SessionState.CONVERTING
        self.prompter.say(fmt.FETCHING)
        try:
            converted = self.provider.convert(source, target, amount)
        except ConversionError as e:
            logger.info("Conversion %s -> %s failed: %s", source, target, e.detail)
            self.prompter.say(fmt.conversion_failed(str(e)))
            self.prompter.say(fmt.CHECK_CONNECTION)
        else:
            self.state = SessionState.DISPLAYING
            record = ConversionRecord(amount=amount, source=source, target=target, converted=converted)
            self.prompter.say(fmt.final_result(record))
            self.history.record(record)

        self.state = SessionState.MENU_CHOICE
        return self._menu()

    def show_history(self) -> None:
        for line in fmt.history_lines(self.history.list()):
            self.prompter.say(line)

    def _menu(self) -> SessionState:
        self.prompter.say(fmt.menu())
        option = self.prompter.ask(fmt.PROMPT_OPTION)

        if option == fmt.OPTION_NEW:
            return SessionState.PROMPTING
        if option == fmt.OPTION_HISTORY:
            self.show_history()
            self.prompter.ask(fmt.PROMPT_CONTINUE)
            return SessionState.PROMPTING

        # Any other input, including empty, exits
        self.prompter.say(fmt.GOODBYE)
        return SessionState.TERMINATED
