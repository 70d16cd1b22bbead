"""Periodic jobs of the core module."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from typing import Any

from pymongo.database import Database
from pymongo.errors import PyMongoError

from nutrix.notifications import NotificationService

log = logging.getLogger(__name__)

EXPIRY_WARNING_WINDOW = timedelta(days=14)
EXPIRE_SOON_TOPIC = "expire_soon"


def _as_aware(value: Any) -> datetime | None:
    if not isinstance(value, datetime):
        return None
    return value if value.tzinfo is not None else value.replace(tzinfo=timezone.utc)


def check_expiration_dates(database: Database, notification_service: NotificationService) -> list[str]:
    """Warn about material entries that expire within two weeks.

    Each warning is logged and pushed to the "expire_soon" topic. Entries
    without an expiration date count as expired. Returns the warnings sent.
    """
    log.info("core:background: Checking expiration dates")
    now = datetime.now(timezone.utc)
    warnings: list[str] = []

    try:
        materials = list(database["materials"].find({}))
    except PyMongoError as exc:
        log.error("%s", exc)
        return warnings

    for material in materials:
        for entry in material.get("entries") or []:
            expires = _as_aware(entry.get("expiration_date"))
            if expires is not None and expires - now > EXPIRY_WARNING_WINDOW:
                continue

            msg = (
                f"Material {material.get('name', '')}, entry {entry.get('id', '')} "
                "will expire within 2 weeks"
            )
            log.warning(msg)
            payload = json.dumps(
                {
                    "type": "topic_message",
                    "topic_name": EXPIRE_SOON_TOPIC,
                    "message": msg,
                    "severity": "warn",
                    "date": now.isoformat(),
                }
            )
            notification_service.send_to_topic(EXPIRE_SOON_TOPIC, payload)
            warnings.append(msg)

    return warnings