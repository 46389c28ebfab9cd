from django.core.exceptions import PermissionDenied
from django.shortcuts import get_object_or_404

from portal.models import Notification


def my_notifications(user, limit=50, unread_only=False):
    qs = Notification.objects.filter(user=user)
    if unread_only:
        qs = qs.filter(is_read=False)
    return qs.order_by("is_read", "-created_at")[:limit]


def unread_count(user):
    return Notification.objects.filter(user=user, is_read=False).count()


def mark_as_read(user, notification_id):
    notification = get_object_or_404(Notification, id=notification_id)

    if notification.user_id != user.id:
        raise PermissionDenied("Not your notification.")

    if not notification.is_read:
        notification.is_read = True
        notification.save(update_fields=["is_read"])

    return notification


def mark_all_read(user):
    return Notification.objects.filter(user=user, is_read=False).update(is_read=True)
