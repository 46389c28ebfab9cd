import logging

from django.contrib import messages
from django.contrib.auth import get_user_model
from django.contrib.auth.decorators import login_required
from django.core.exceptions import PermissionDenied, ValidationError
from django.core.paginator import Paginator
from django.db.models import Count, Q
from django.http import HttpResponse, HttpResponseBadRequest, JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST
from reportlab.lib import colors
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from academics.models import Department, Subject
from academics.services.subject_colors import get_bulk_subject_colors
from .colors import DEFAULT_SUBJECT_COLOR
from .decorators import role_required
from .forms import NoticeForm
from .models import Notice, SystemLog
from .services import notices as notice_service
from .services import notifications as notification_service

logger = logging.getLogger(__name__)

# lowest baseline for notice PDF body text; the footer sits below it
PDF_BOTTOM_MARGIN = 80

User = get_user_model()


def home(request):
    if request.user.is_authenticated:
        return redirect("portal:dashboard")
    return redirect("login")


def dashboard_redirect(request):
    """Redirect users to the correct dashboard based on role."""
    if not request.user.is_authenticated:
        return redirect("login")

    role = getattr(request.user, "role", None)
    if role == "admin":
        return redirect("portal:admin_dashboard")
    elif role == "faculty":
        return redirect("portal:faculty_dashboard")
    elif role == "student":
        return redirect("portal:student_dashboard")
    else:
        return redirect("portal:unauthorized")


def unauthorized(request):
    return render(request, "portal/unauthorized.html", status=403)


def _is_ajax(request):
    return request.headers.get("x-requested-with") == "XMLHttpRequest"


def _subject_cards(subjects):
    subjects = list(subjects)
    subject_colors = get_bulk_subject_colors(subjects)
    return [
        {
            "id": s.id,
            "code": s.code,
            "name": s.name,
            "semester": s.semester,
            "credits": s.credits,
            "color": subject_colors.get(s.id, DEFAULT_SUBJECT_COLOR),
        }
        for s in subjects
    ]


# -------------------------------
# DASHBOARDS
# -------------------------------

@role_required("admin")
def admin_dashboard(request):
    role_counts = dict(
        User.objects.values("role").annotate(total=Count("id")).values_list("role", "total")
    )

    stats = {
        "students": role_counts.get("student", 0),
        "faculty": role_counts.get("faculty", 0),
        "admins": role_counts.get("admin", 0),
        "departments": Department.objects.count(),
        "subjects": Subject.objects.filter(is_active=True).count(),
        "active_notices": notice_service.active_notices().count(),
    }

    return render(request, "portal/admin_dashboard.html", {
        "stats": stats,
        "notices": notice_service.notice_board(notice_service.recent_notices()),
        "recent_logs": SystemLog.objects.select_related("user")[:10],
    })


@role_required("faculty")
def faculty_dashboard(request):
    subjects = request.user.subjects_taught.filter(is_active=True).select_related("department")

    return render(request, "portal/faculty_dashboard.html", {
        "subjects": _subject_cards(subjects),
        "notices": notice_service.notice_board(notice_service.recent_notices()),
    })


@role_required("student")
def student_dashboard(request):
    user = request.user

    subjects = Subject.objects.none()
    if user.department_id:
        subjects = Subject.objects.filter(department_id=user.department_id, is_active=True)
        if user.semester:
            subjects = subjects.filter(semester=user.semester)

    return render(request, "portal/student_dashboard.html", {
        "subjects": _subject_cards(subjects),
        "notices": notice_service.notice_board(notice_service.recent_notices()),
        "important_notices": notice_service.notice_board(notice_service.important_notices()[:3]),
    })


# -------------------------------
# NOTICES
# -------------------------------

@role_required("admin")
def admin_notices(request):
    return render(request, "portal/notices.html", {
        "notices": notice_service.notice_board(notice_service.all_notices()),
        "form": NoticeForm(),
        "can_create": True,
        "can_edit": True,
    })


@role_required("faculty")
def faculty_notices(request):
    return render(request, "portal/notices.html", {
        "notices": notice_service.notice_board(notice_service.active_notices()),
        "form": NoticeForm(),
        "can_create": True,
        "can_edit": False,
    })


@role_required("student")
def student_notices(request):
    return render(request, "portal/notices.html", {
        "notices": notice_service.notice_board(notice_service.active_notices()),
        "can_create": False,
        "can_edit": False,
    })


@require_POST
@role_required("admin", "faculty")
def notice_create(request):
    try:
        notice = notice_service.create_notice(request.user, request.POST)
    except ValidationError as ve:
        logger.warning("Rejected notice from %s: %s", request.user.username, ve.messages[0])
        messages.error(request, ve.messages[0])
    else:
        messages.success(request, f"Notice '{notice.title}' published.")

    return redirect(f"portal:{request.user.role}_notices")


@login_required
def notice_detail(request, notice_id):
    notice = get_object_or_404(
        Notice.objects.select_related("author", "department"), id=notice_id
    )
    card = notice_service.notice_board([notice])[0]
    card["date"] = card["date"].isoformat()
    card["expires_at"] = card["expires_at"].isoformat() if card["expires_at"] else None
    return JsonResponse({"success": True, "notice": card})


@login_required
def notice_update(request, notice_id):
    if request.method != "POST":
        return HttpResponseBadRequest("POST required.")

    notice = get_object_or_404(Notice, id=notice_id)

    try:
        notice = notice_service.update_notice(request.user, notice, request.POST)
    except PermissionDenied as pd:
        return JsonResponse({"success": False, "error": str(pd)}, status=403)
    except ValidationError as ve:
        return JsonResponse({"success": False, "error": ve.messages[0]}, status=400)

    return JsonResponse({"success": True, "id": str(notice.id), "message": "Notice updated successfully"})


@login_required
def notice_delete(request, notice_id):
    if request.method != "POST":
        return HttpResponseBadRequest("POST required.")

    notice = get_object_or_404(Notice, id=notice_id)

    try:
        deleted_id = notice_service.delete_notice(request.user, notice)
    except PermissionDenied as pd:
        if not _is_ajax(request):
            messages.error(request, str(pd))
            return redirect("portal:dashboard")
        return JsonResponse({"success": False, "error": str(pd)}, status=403)

    if not _is_ajax(request):
        messages.success(request, "Notice deleted successfully.")
        return redirect(f"portal:{request.user.role}_notices")

    return JsonResponse({"success": True, "id": deleted_id, "message": "Notice deleted successfully"})


@login_required
def notice_pdf(request, notice_id):
    notice = get_object_or_404(Notice.objects.select_related("author", "department"), id=notice_id)

    response = HttpResponse(content_type="application/pdf")
    response["Content-Disposition"] = f'attachment; filename="notice_{notice.id}.pdf"'

    p = canvas.Canvas(response, pagesize=letter)
    width, height = letter
    header_top = height - 50

    p.setFont("Helvetica-Bold", 16)
    p.setFillColor(colors.HexColor("#1f2937"))  # slate-800
    p.drawCentredString(width / 2, header_top, "CAMPUS NOTICE BOARD")

    p.setStrokeColor(colors.HexColor("#e5e7eb"))
    p.setLineWidth(0.6)
    p.line(50, header_top - 20, width - 50, header_top - 20)

    p.setFont("Helvetica-Bold", 14)
    p.setFillColor(colors.HexColor("#111827"))
    p.drawString(60, header_top - 55, notice.title)

    p.setFont("Helvetica", 9)
    p.setFillColor(colors.HexColor("#6b7280"))  # gray-500
    details = [
        notice.get_type_display(),
        f"Posted by {notice.author.display_name}",
        notice.published_at.strftime("%d %b %Y"),
    ]
    if notice.department:
        details.append(notice.department.name)
    if notice.is_important:
        details.insert(0, "IMPORTANT")
    p.drawString(60, header_top - 72, " | ".join(details))

    # Body, wrapped to the printable width
    max_width = width - 120
    lines = []
    for paragraph in notice.content.splitlines() or [""]:
        line = ""
        for word in paragraph.split():
            candidate = f"{line} {word}".strip()
            if p.stringWidth(candidate, "Helvetica", 11) > max_width and line:
                lines.append(line)
                line = word
            else:
                line = candidate
        lines.append(line)

    def body_text(top):
        p.setFont("Helvetica", 11)
        p.setFillColor(colors.HexColor("#111827"))
        text = p.beginText(60, top)
        text.setLeading(16)
        return text

    text = body_text(header_top - 105)
    for line in lines:
        # keep clear of the footer line
        if text.getY() < PDF_BOTTOM_MARGIN:
            p.drawText(text)
            p.showPage()
            text = body_text(height - 60)
        text.textLine(line)
    p.drawText(text)

    if notice.expires_at:
        p.setFont("Helvetica-Oblique", 9)
        p.setFillColor(colors.HexColor("#6b7280"))
        p.drawString(60, 50, f"Valid until {notice.expires_at.strftime('%d %b %Y %H:%M')}")

    p.showPage()
    p.save()
    return response


# -------------------------------
# NOTIFICATIONS
# -------------------------------

@login_required
def notifications_page(request):
    unread_only = request.GET.get("unread") == "1"
    return render(request, "portal/notifications.html", {
        "notifications": notification_service.my_notifications(request.user, unread_only=unread_only),
        "unread_only": unread_only,
    })


@login_required
def notifications_unread_count(request):
    return JsonResponse({"success": True, "count": notification_service.unread_count(request.user)})


@login_required
def notification_mark_read(request, notification_id):
    if request.method != "POST":
        return HttpResponseBadRequest("POST required.")

    try:
        notification_service.mark_as_read(request.user, notification_id)
    except PermissionDenied as pd:
        return JsonResponse({"success": False, "error": str(pd)}, status=403)

    return JsonResponse({"success": True, "count": notification_service.unread_count(request.user)})


@require_POST
@login_required
def notifications_mark_all_read(request):
    updated = notification_service.mark_all_read(request.user)
    messages.success(request, f"{updated} notification(s) marked as read.")
    return redirect("portal:notifications")


# -------------------------------
# AUDIT LOG
# -------------------------------

@role_required("admin")
def admin_logs(request):
    logs = SystemLog.objects.select_related("user").order_by("-timestamp")

    # SEARCH
    search = request.GET.get("search", "")
    if search:
        logs = logs.filter(Q(message__icontains=search) | Q(meta__icontains=search))

    # CATEGORY
    category = request.GET.get("category", "")
    if category:
        logs = logs.filter(category=category)

    # USER FILTER
    user_id = request.GET.get("user", "")
    if user_id:
        logs = logs.filter(user_id=user_id)

    # PAGINATION
    paginator = Paginator(logs, 15)
    page_obj = paginator.get_page(request.GET.get("page"))

    return render(request, "portal/admin_logs.html", {
        "page_obj": page_obj,
        "categories": SystemLog.CATEGORY_CHOICES,
        "users": User.objects.all().order_by("first_name"),
        "search": search,
        "category": category,
    })
