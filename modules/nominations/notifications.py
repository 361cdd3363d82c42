"""E-mail notices for new nominations.

A notice is written to the ``notifications`` outbox in the same
transaction as the nomination and delivered afterwards through the
Resend HTTP API.  Delivery failures never undo a nomination: the row
stays pending and ``retry_notifications.py`` picks it up later.
"""

from __future__ import annotations

import logging
from typing import Optional, Tuple

import requests
from flask import current_app, render_template

from errors import DependencyFailure
from extensions import db
from modules.nominations.models import (
    NOTIFICATION_PENDING,
    NOTIFICATION_SENT,
    Notification,
    Record,
)
from utils import utcnow

logger = logging.getLogger(__name__)

NOMINATION_SUBJECT = "There is a new dev nomination!"


def queue_nomination_notice(record: Record) -> Notification:
    """Add an outbox row describing ``record``; the caller commits."""
    notification = Notification(
        record_id=record.id,
        subject=NOMINATION_SUBJECT,
        body=render_template("emails/nomination.html", record=record),
        status=NOTIFICATION_PENDING,
        attempts=0,
    )
    db.session.add(notification)
    return notification


def send_email(subject: str, html: str) -> None:
    """Post one e-mail to Resend.

    Raises:
        DependencyFailure: Resend is not configured or the request failed.
    """
    config = current_app.config
    api_key = config.get("RESEND_API_KEY")
    sender = config.get("RESEND_ADDRESS_SENDER")
    receiver = config.get("RESEND_ADDRESS_RECEIVER")
    if not api_key or not sender or not receiver:
        raise DependencyFailure(
            "RESEND_API_KEY/RESEND_ADDRESS_SENDER/RESEND_ADDRESS_RECEIVER not configured"
        )

    logger.info("Sending e-mail %r to %s", subject, receiver)
    try:
        response = requests.post(
            config["RESEND_API_URL"],
            json={
                "from": sender,
                "to": [receiver],
                "subject": subject,
                "html": html,
            },
            headers={
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=config.get("NOTIFICATION_TIMEOUT", 20),
        )
        response.raise_for_status()
    except requests.RequestException as exc:
        raise DependencyFailure(f"E-mail provider request failed: {exc}") from exc


def deliver(notification: Notification) -> bool:
    """Try to send one pending notice; return ``True`` once it is sent."""
    if notification.status == NOTIFICATION_SENT:
        return True
    if not current_app.config.get("NOTIFICATIONS_ENABLED", True):
        logger.debug("Notifications disabled; notice %s left pending", notification.id)
        return False

    notification.attempts = (notification.attempts or 0) + 1
    try:
        send_email(notification.subject, notification.body)
    except DependencyFailure as exc:
        notification.last_error = str(exc)[:500]
        db.session.commit()
        logger.warning(
            "Notice %s not delivered (attempt %s): %s",
            notification.id, notification.attempts, exc,
        )
        return False

    notification.status = NOTIFICATION_SENT
    notification.sent_at = utcnow()
    notification.last_error = None
    db.session.commit()
    logger.info("Notice %s delivered", notification.id)
    return True


def retry_pending(max_attempts: Optional[int] = None) -> Tuple[int, int]:
    """Re-send pending notices below ``max_attempts``; return ``(sent, failed)``."""
    if max_attempts is None:
        max_attempts = current_app.config.get("NOTIFICATION_MAX_ATTEMPTS", 5)

    pending = (Notification.query
               .filter(Notification.status == NOTIFICATION_PENDING,
                       Notification.attempts < max_attempts)
               .order_by(Notification.created_at.asc(), Notification.id.asc())
               .all())
    sent = failed = 0
    for notification in pending:
        if deliver(notification):
            sent += 1
        else:
            failed += 1
    return sent, failed
