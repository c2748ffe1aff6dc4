"""
Windows notifier: toast notifications via ``windows-toasts``.

The application id decides which app the toast is attributed to in the
Action Center; it comes from ``REMEMBER_BDAY_APP_ID`` (see config.py).
"""

from __future__ import annotations

import logging

from windows_toasts import Toast, WindowsToaster

from remember_bday.exceptions import NotifierError
from remember_bday.notifications.base import Notifier

logger = logging.getLogger(__name__)


class WindowsNotifier(Notifier):
    """Shows each message as a short toast.

    Args:
        app_id: Application id the toasts are attributed to.
        toaster: Pre-built toaster; a ``WindowsToaster(app_id)`` is
            created when omitted.
    """

    def __init__(self, app_id: str, toaster=None) -> None:
        self.app_id = app_id
        self._toaster = toaster if toaster is not None else WindowsToaster(app_id)

    def send_notification(self, message: str) -> None:
        toast = Toast(text_fields=[message])
        try:
            self._toaster.show_toast(toast)
        except OSError as exc:
            raise NotifierError(str(exc)) from exc
        logger.debug("Shown toast for app id %s", self.app_id)
