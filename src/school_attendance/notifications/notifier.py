from __future__ import annotations

import logging
from typing import Optional, Protocol

import resend
from markupsafe import escape
from resend.exceptions import ResendError

from ..core.constants import ABSENCE_SUBJECT, DEFAULT_MAIL_FROM
from ..core.exceptions import NotificationError
from .model import AbsenceNotice

logger = logging.getLogger(__name__)


def build_absence_html(notice: AbsenceNotice) -> str:
    return (
        f"<p>Dear Guardian,<br><br>"
        f"Your child {escape(notice.student_name)} was absent on {escape(notice.date)}</p>"
    )


class Notifier(Protocol):
    """Sends one guardian email. Raises NotificationError on failure."""

    def send_absence(self, notice: AbsenceNotice) -> Optional[str]:
        raise NotImplementedError


class ResendNotifier(Notifier):
    """Delivers absence emails through the Resend API."""

    def __init__(self, *, api_key: str, sender: str = DEFAULT_MAIL_FROM):
        if not api_key:
            raise ValueError("Resend API key is required")
        resend.api_key = api_key
        self._sender = sender

    def send_absence(self, notice: AbsenceNotice) -> Optional[str]:
        params = {
            "from": self._sender,
            "to": [notice.recipient],
            "subject": ABSENCE_SUBJECT,
            "html": build_absence_html(notice),
        }
        try:
            response = resend.Emails.send(params)
        except ResendError as e:
            raise NotificationError(f"Resend rejected email to {notice.recipient}: {e}") from e
        message_id = response.get("id") if isinstance(response, dict) else None
        logger.debug(f"Resend accepted email to {notice.recipient} (id={message_id})")
        return message_id


class LoggingNotifier(Notifier):
    """Used when no API key is configured: logs the email instead of sending it."""

    def __init__(self, *, sender: str = DEFAULT_MAIL_FROM):
        self._sender = sender

    def send_absence(self, notice: AbsenceNotice) -> Optional[str]:
        logger.warning(
            f"RESEND_API_KEY not set; not sending '{ABSENCE_SUBJECT}' from {self._sender} "
            f"to {notice.recipient} ({notice.student_name}, {notice.date})"
        )
        return None


def build_notifier(*, api_key: Optional[str], sender: str) -> Notifier:
    if api_key:
        return ResendNotifier(api_key=api_key, sender=sender)
    return LoggingNotifier(sender=sender)
