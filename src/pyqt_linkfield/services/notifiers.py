"""Headless notifier that routes notices to the log."""

import logging

logger = logging.getLogger(__name__)


class LoggingNotifier:
    """Notifier for hosts without a toast mechanism (scripts, tests, CLI tools)."""

    def success(self, message: str) -> None:
        logger.info(message)

    def warning(self, message: str) -> None:
        logger.warning(message)

    def error(self, message: str) -> None:
        logger.error(message)
