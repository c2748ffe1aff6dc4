"""
Notifiers sub-package for remember-bday.

Design: Strategy Pattern
- base.py defines the Notifier ABC and the DryRunNotifier.
- linux.py implements DbusNotifier (freedesktop portal over D-Bus).
- windows.py implements WindowsNotifier (toast notifications).

select_notifier() picks the implementation for the running platform at
start-up. Platform modules are imported lazily so each platform only
needs its own notification library installed.
"""

from __future__ import annotations

import logging
import sys

from remember_bday.config import AppConfig
from remember_bday.exceptions import NotifierError
from remember_bday.notifications.base import DryRunNotifier, Notifier

__all__ = ["Notifier", "DryRunNotifier", "select_notifier"]

logger = logging.getLogger(__name__)


def select_notifier(
    config: AppConfig,
    platform: str | None = None,
    dry_run: bool = False,
) -> Notifier:
    """Build the notifier for *platform* (defaults to ``sys.platform``).

    Raises:
        NotifierError: If the platform has no notifier implementation.
    """
    if dry_run:
        return DryRunNotifier()

    if platform is None:
        platform = sys.platform

    if platform.startswith("linux"):
        from remember_bday.notifications.linux import DbusNotifier

        logger.debug("Using D-Bus portal notifier")
        return DbusNotifier(config.notification)

    if platform == "win32":
        from remember_bday.notifications.windows import WindowsNotifier

        logger.debug("Using Windows toast notifier (app id %s)", config.windows_app_id)
        return WindowsNotifier(config.windows_app_id)

    raise NotifierError(f"notifications are not supported on platform '{platform}'")
