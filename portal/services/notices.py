from datetime import timedelta

from django.contrib.auth import get_user_model
from django.core.exceptions import PermissionDenied, ValidationError
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from portal.colors import notice_card_color
from portal.forms import NoticeForm
from portal.models import Notice, Notification
from portal.utils import log_event, notices_url_for, truncate_message


NOTICE_AUTHOR_ROLES = ("admin", "faculty")


def _first_error(form):
    for field, errors in form.errors.items():
        return errors[0] if field == "__all__" else f"{field}: {errors[0]}"
    return "Invalid notice data."


def _validated(data, instance=None):
    form = NoticeForm(data, instance=instance)
    if not form.is_valid():
        raise ValidationError(_first_error(form))
    return form


# -------------------------------
# QUERIES
# -------------------------------

def active_notices(now=None):
    """Notices that never expire or have not expired yet, important first."""
    now = now or timezone.now()
    return (
        Notice.objects
        .filter(Q(expires_at__isnull=True) | Q(expires_at__gt=now))
        .select_related("author", "department")
        .order_by("-is_important", "-published_at")
    )


def important_notices(now=None):
    return active_notices(now).filter(is_important=True).order_by("-published_at")


def recent_notices(limit=5, now=None):
    now = now or timezone.now()
    week_ago = now - timedelta(days=7)
    return (
        Notice.objects
        .filter(published_at__gte=week_ago)
        .select_related("author", "department")
        .order_by("-published_at")[:limit]
    )


def all_notices():
    return Notice.objects.select_related("author", "department").order_by("-published_at")


def notice_board(notices, now=None):
    """Shape notices into the card view model used by every notices page."""
    now = now or timezone.now()
    board = []
    for n in notices:
        board.append({
            "id": str(n.id),
            "title": n.title,
            "description": n.content,
            "type": n.type,
            "type_label": n.get_type_display(),
            "posted_by": n.author.display_name,
            "author_id": n.author_id,
            "date": n.published_at,
            "expires_at": n.expires_at,
            "is_important": n.is_important,
            "is_expired": n.is_expired(now),
            "department": (
                {"id": n.department.id, "name": n.department.name, "code": n.department.code}
                if n.department else None
            ),
            "image_url": n.image_url,
            "color": notice_card_color(str(n.id)),
        })
    return board


# -------------------------------
# MUTATIONS
# -------------------------------

def _notification_recipients(department=None):
    User = get_user_model()
    users = User.objects.filter(is_active=True)
    if department is not None:
        users = users.filter(department=department)
    return users.only("id", "role")


@transaction.atomic
def create_notice(author, data) -> Notice:
    """
    Create a notice and notify every active user (or only the members of the
    notice's department when one is set).
    """
    if getattr(author, "role", None) not in NOTICE_AUTHOR_ROLES:
        raise PermissionDenied("Admin or Faculty access required.")

    form = _validated(data)
    notice = form.save(commit=False)
    notice.author = author
    notice.save()

    message = truncate_message(notice.content)
    Notification.objects.bulk_create([
        Notification(
            user=u,
            type="NOTICE",
            title=notice.title,
            message=message,
            link=notices_url_for(u.role),
        )
        for u in _notification_recipients(notice.department)
    ])

    log_event(author, "notice", f"Notice created: {notice.title}", meta={"notice_id": str(notice.id)})
    return notice


@transaction.atomic
def update_notice(user, notice, data) -> Notice:
    if getattr(user, "role", None) != "admin":
        raise PermissionDenied("Admin access required.")

    notice = _validated(data, instance=notice).save()

    log_event(user, "notice", f"Notice updated: {notice.title}", meta={"notice_id": str(notice.id)})
    return notice


@transaction.atomic
def delete_notice(user, notice):
    """Admins may delete any notice; faculty only the ones they wrote."""
    role = getattr(user, "role", None)
    if role not in NOTICE_AUTHOR_ROLES:
        raise PermissionDenied("Admin or Faculty access required.")
    if role == "faculty" and notice.author_id != user.id:
        raise PermissionDenied("You can only delete your own notices.")

    notice_id = str(notice.id)
    title = notice.title
    notice.delete()

    log_event(user, "notice", f"Notice deleted: {title}", meta={"notice_id": notice_id})
    return notice_id
