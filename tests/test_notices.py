# tests/test_notices.py

from datetime import timedelta

import pytest
from django.core.exceptions import PermissionDenied, ValidationError
from django.utils import timezone

from portal.colors import notice_card_color
from portal.models import Notice, Notification, SystemLog
from portal.services import notices as svc


def payload(**overrides):
    data = {
        "title": "Mid-term schedule",
        "content": "Mid-term exams start on Monday in the main hall.",
        "type": "EXAM",
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
def test_create_notice_by_admin_notifies_everyone(admin_user, faculty_user, student_user):
    notice = svc.create_notice(admin_user, payload())

    assert notice.author == admin_user
    assert notice.type == "EXAM"
    assert Notification.objects.filter(type="NOTICE").count() == 3

    student_note = Notification.objects.get(user=student_user)
    assert student_note.title == "Mid-term schedule"
    assert student_note.link == "/dashboard/student/notices/"
    assert Notification.objects.get(user=faculty_user).link == "/dashboard/faculty/notices/"

    assert SystemLog.objects.filter(category="notice", user=admin_user).exists()


@pytest.mark.django_db
def test_create_notice_skips_inactive_users(admin_user, student_user):
    student_user.is_active = False
    student_user.save()

    svc.create_notice(admin_user, payload())

    assert not Notification.objects.filter(user=student_user).exists()


@pytest.mark.django_db
def test_department_notice_only_notifies_members(admin_user, faculty_user, student_user, other_department, make_user):
    outsider = make_user("math", "student", department=other_department)

    svc.create_notice(faculty_user, payload(department=faculty_user.department_id))

    recipients = set(Notification.objects.values_list("user_id", flat=True))
    assert recipients == {faculty_user.id, student_user.id}
    assert outsider.id not in recipients


@pytest.mark.django_db
def test_notification_message_is_truncated(admin_user):
    svc.create_notice(admin_user, payload(content="x" * 150))

    note = Notification.objects.get(user=admin_user)
    assert note.message == "x" * 100 + "..."


@pytest.mark.django_db
def test_student_cannot_create(student_user):
    with pytest.raises(PermissionDenied):
        svc.create_notice(student_user, payload())
    assert Notice.objects.count() == 0


@pytest.mark.django_db
@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"title": "Hi"}, "Title must be at least 3 characters"),
        ({"content": "too short"}, "Content must be at least 10 characters"),
    ],
)
def test_invalid_notice(admin_user, overrides, message):
    with pytest.raises(ValidationError) as exc:
        svc.create_notice(admin_user, payload(**overrides))
    assert message in exc.value.messages[0]
    assert Notification.objects.count() == 0


@pytest.mark.django_db
def test_type_defaults_to_general(admin_user):
    notice = svc.create_notice(admin_user, payload(type=""))
    assert notice.type == "GENERAL"


@pytest.mark.django_db
def test_update_requires_admin(notice, admin_user, faculty_user):
    with pytest.raises(PermissionDenied):
        svc.update_notice(faculty_user, notice, payload())

    updated = svc.update_notice(admin_user, notice, payload(title="Library hours extended", is_important="on"))
    assert updated.title == "Library hours extended"
    assert updated.is_important is True


@pytest.mark.django_db
def test_faculty_deletes_only_own(notice, faculty_user, admin_user):
    with pytest.raises(PermissionDenied):
        svc.delete_notice(faculty_user, notice)

    own = svc.create_notice(faculty_user, payload())
    own_id = str(own.id)
    assert svc.delete_notice(faculty_user, own) == own_id
    assert not Notice.objects.filter(id=own_id).exists()

    svc.delete_notice(admin_user, notice)
    assert Notice.objects.count() == 0


@pytest.mark.django_db
def test_active_notices_ordering_and_expiry(admin_user):
    now = timezone.now()
    old = Notice.objects.create(title="Old", content="Older general notice", author=admin_user,
                                published_at=now - timedelta(days=2))
    new = Notice.objects.create(title="New", content="Newer general notice", author=admin_user,
                                published_at=now - timedelta(hours=1))
    pinned = Notice.objects.create(title="Pinned", content="Important old notice", author=admin_user,
                                   is_important=True, published_at=now - timedelta(days=5))
    Notice.objects.create(title="Gone", content="This one has expired", author=admin_user,
                          expires_at=now - timedelta(minutes=1))
    future = Notice.objects.create(title="Later", content="Expires next week", author=admin_user,
                                   published_at=now - timedelta(days=3), expires_at=now + timedelta(days=7))

    assert list(svc.active_notices(now)) == [pinned, new, old, future]
    assert list(svc.important_notices(now)) == [pinned]


@pytest.mark.django_db
def test_recent_notices_limits_to_last_week(admin_user):
    now = timezone.now()
    for days in (1, 2, 3, 10):
        Notice.objects.create(title=f"{days}d", content="Some notice content", author=admin_user,
                              published_at=now - timedelta(days=days))

    recent = list(svc.recent_notices(limit=2, now=now))
    assert [n.title for n in recent] == ["1d", "2d"]
    assert len(svc.recent_notices(now=now)) == 3


@pytest.mark.django_db
def test_notice_board_view_model(notice, department):
    notice.department = department
    notice.save()

    card = svc.notice_board([notice])[0]

    assert card["id"] == str(notice.id)
    assert card["description"] == notice.content
    assert card["posted_by"] == "Ada Admin"
    assert card["department"] == {"id": department.id, "name": "Computer Science", "code": "CSE"}
    assert card["color"] == notice_card_color(str(notice.id))
