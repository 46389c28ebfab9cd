import json
import logging

from django.urls import reverse

from .models import SystemLog

logger = logging.getLogger(__name__)


def log_event(user, category, message, meta=None):
    if meta is not None and not isinstance(meta, str):
        meta = json.dumps(meta, default=str)

    logger.info("[%s] %s", category, message)

    SystemLog.objects.create(
        user=user,
        category=category,
        message=message,
        meta=meta
    )


def notices_url_for(role):
    """Link to a role's notices page, used in notifications."""
    if role not in ("admin", "faculty"):
        role = "student"
    return reverse(f"portal:{role}_notices")


def truncate_message(content, limit=100):
    if len(content) > limit:
        return content[:limit] + "..."
    return content
