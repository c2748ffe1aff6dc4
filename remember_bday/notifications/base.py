"""
Base notifier interface for remember-bday.

All platform notifiers implement this interface. The contract is:
1. send_notification() delivers one text message or raises NotifierError.
2. close() releases any connection held by the notifier; notifiers are
   context managers so the CLI can scope them with ``with``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class Notifier(ABC):
    """Abstract base class for notification sinks."""

    @abstractmethod
    def send_notification(self, message: str) -> None:
        """Deliver *message* to the user.

        Raises:
            NotifierError: If the platform service rejects or drops the message.
        """

    def close(self) -> None:
        """Release resources. The default implementation does nothing."""

    def __enter__(self) -> Notifier:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class DryRunNotifier(Notifier):
    """Logs messages instead of delivering them.

    Used for ``--dry-run`` and on machines without a notification service.
    Delivered messages are kept in ``messages`` for inspection.
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def send_notification(self, message: str) -> None:
        logger.info("[dry-run] %s", message)
        self.messages.append(message)
