"""
Linux notifier: freedesktop notification portal over D-Bus.

Calls ``org.freedesktop.portal.Notification.AddNotification`` on the
session bus. The portal works both inside and outside Flatpak sandboxes
and shows the message through the desktop's own notification daemon.

Notifications with the same id replace each other, so every message
sent through one notifier gets its own ``<notification_id>-<n>`` id.
"""

from __future__ import annotations

import logging

from jeepney import DBusAddress, new_method_call
from jeepney.io.blocking import open_dbus_connection
from jeepney.wrappers import DBusErrorResponse, unwrap_msg

from remember_bday.config import NotificationConfig
from remember_bday.exceptions import NotifierError
from remember_bday.notifications.base import Notifier

logger = logging.getLogger(__name__)

PORTAL = DBusAddress(
    "/org/freedesktop/portal/desktop",
    bus_name="org.freedesktop.portal.Desktop",
    interface="org.freedesktop.portal.Notification",
)


class DbusNotifier(Notifier):
    """Sends notifications through the desktop portal.

    Args:
        settings: Title, priority, timeout and id prefix.
        connection: An open jeepney blocking connection. When omitted,
            a session bus connection is opened on first use and closed
            by ``close()``.
    """

    def __init__(self, settings: NotificationConfig, connection=None) -> None:
        self.settings = settings
        self._connection = connection
        self._owns_connection = connection is None
        self._sent = 0

    def _connect(self):
        if self._connection is None:
            try:
                self._connection = open_dbus_connection(bus="SESSION")
            except (OSError, KeyError, ValueError) as exc:
                raise NotifierError(f"cannot open D-Bus session connection: {exc}") from exc
            logger.debug("Opened D-Bus session connection")
        return self._connection

    def send_notification(self, message: str) -> None:
        self._sent += 1
        notification_id = f"{self.settings.notification_id}-{self._sent}"
        body = {
            "title": ("s", self.settings.title),
            "body": ("s", message),
            "priority": ("s", self.settings.priority),
        }
        msg = new_method_call(PORTAL, "AddNotification", "sa{sv}", (notification_id, body))

        conn = self._connect()
        try:
            reply = conn.send_and_get_reply(msg, timeout=self.settings.timeout_ms / 1000)
            unwrap_msg(reply)
        except DBusErrorResponse as exc:
            raise NotifierError(str(exc)) from exc
        except OSError as exc:
            raise NotifierError(f"D-Bus call failed: {exc}") from exc
        logger.debug("Portal accepted notification %s", notification_id)

    def close(self) -> None:
        if self._owns_connection and self._connection is not None:
            self._connection.close()
            self._connection = None
