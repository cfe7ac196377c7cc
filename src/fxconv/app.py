# src/fxconv/app.py
"""
Application Entry Point - Converter Initialization and Startup

This module serves as the composition root for the FXConv console converter.
It wires all dependencies and runs the interactive session.

Files that USE this module:
- fxconv.__main__ (python -m fxconv)
- the "fxconv" console script declared in pyproject.toml

Files that this module USES:
- fxconv.shared.logging_conf (setup_logging for logging configuration)
- fxconv.config (settings for configuration management)
- fxconv.adapters.console.prompter (Prompter bound to the terminal)
- fxconv.adapters.providers.frankfurter (FrankfurterProvider for live rates)
- fxconv.application.session (SessionController running the cycles)
"""

from __future__ import annotations  # Enable postponed evaluation of annotations for forward references

import logging  # Standard library for logging messages and errors
import sys  # System-specific parameters and functions for exit codes
from typing import Optional  # Type hints for optional values

from fxconv.config import settings  # Application settings
from fxconv.shared.logging_conf import setup_logging  # Configure logging with file rotation
from fxconv.adapters.console.prompter import Prompter  # Blocking terminal prompt
from fxconv.adapters.formatting.formatter import GOODBYE  # Farewell line
from fxconv.adapters.providers.base import RateProvider  # Rate provider interface
from fxconv.adapters.providers.frankfurter import FrankfurterProvider  # Frankfurter API client
from fxconv.application.session import SessionController  # Conversion cycle and menu


def run(prompter: Optional[Prompter] = None, provider: Optional[RateProvider] = None) -> int:
    """
    Run one interactive session.

    Args:
        prompter: Terminal I/O (defaults to stdin/stdout)
        provider: Rate provider (defaults to FrankfurterProvider)

    Returns:
        Process exit status (always 0 when the session ends normally)
    """
    logger = logging.getLogger(__name__)
    prompter = prompter or Prompter()
    provider = provider or FrankfurterProvider()
    controller = SessionController(prompter=prompter, provider=provider)

    try:
        controller.run()
    except (EOFError, KeyboardInterrupt) as e:
        # Closed input or Ctrl+C ends the session like the Exit option
        logger.info("Session interrupted (%s)", type(e).__name__)
        prompter.say()
        prompter.say(GOODBYE)
    except Exception as e:
        logger.exception("Unexpected error during session: %s (type: %s)", e, type(e).__name__)
        raise

    return 0


def main() -> None:
    """
    Initialize and run the converter.

    This function:
    1. Sets up logging from settings
    2. Creates the prompter, rate provider and session controller
    3. Runs the session until the user exits
    4. Exits the process with status 0
    """
    setup_logging(
        level=settings.log_level,
        log_file=settings.log_file,
        log_dir=settings.log_dir,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        log_stdout=settings.log_stdout,
    )
    logger = logging.getLogger(__name__)
    logger.info("Using exchange-rate API: %s", settings.api_url)

    sys.exit(run())


if __name__ == "__main__":
    main()
