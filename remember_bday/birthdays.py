"""
Birthday matching and notification dispatch.

Compares each contact's birthday against "today" by month and day only
and sends one notification per match. Delivery is sequential and stops
at the first failure; nothing is retried.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date

from remember_bday.config import DEFAULT_MESSAGE_TEMPLATE
from remember_bday.notifications.base import Notifier
from remember_bday.parsers.base import Contact

logger = logging.getLogger(__name__)


def is_birthday(contact: Contact, today: date) -> bool:
    """Return True if *contact* has a birthday falling on *today*'s month and day.

    Contacts born on 29 February only match on 29 February.
    """
    bday = contact.birthday
    if bday is None:
        return False
    return bday.month == today.month and bday.day == today.day


def birthday_message(name: str, template: str = DEFAULT_MESSAGE_TEMPLATE) -> str:
    """Render the notification text for *name*."""
    return template.replace("{name}", name)


def send_bday_notifications(
    notifier: Notifier,
    contacts: Iterable[Contact],
    today: date | None = None,
    template: str = DEFAULT_MESSAGE_TEMPLATE,
) -> list[str]:
    """Notify about every contact whose birthday is today.

    Args:
        notifier: Where messages are delivered.
        contacts: Parsed contacts, in the order notifications should go out.
        today: The date to compare against; defaults to the local date.
        template: Message template containing ``{name}``.

    Returns:
        The messages that were delivered, in order.

    Raises:
        NotifierError: On the first delivery failure. Contacts after the
            failing one are not notified.
    """
    if today is None:
        today = date.today()

    sent: list[str] = []
    for contact in contacts:
        if not is_birthday(contact, today):
            continue
        message = birthday_message(contact.name, template)
        logger.debug("Sending notification for %s", contact.name)
        notifier.send_notification(message)
        sent.append(message)

    logger.info("Sent %d birthday notification(s) for %s", len(sent), today.isoformat())
    return sent
