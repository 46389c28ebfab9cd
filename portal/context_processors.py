from django.urls import reverse

from portal.services.notifications import unread_count

NOTICE_PAGES = {
    "admin": "portal:admin_notices",
    "faculty": "portal:faculty_notices",
    "student": "portal:student_notices",
}


def notification_badge(request):
    user = request.user

    if not user.is_authenticated:
        return {}

    # users without a known role get no notices link
    page = NOTICE_PAGES.get(getattr(user, "role", None))

    return {
        "unread_notifications": unread_count(user),
        "notices_url": reverse(page) if page else None,
    }
