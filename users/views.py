from django.shortcuts import render, redirect, get_object_or_404
from django.contrib.auth import authenticate, login, logout
from django.contrib import messages
from django.core.paginator import Paginator
from django.db import IntegrityError, transaction
from django.db.models import Q
from django.http import HttpResponse
from django.utils.http import url_has_allowed_host_and_scheme
from django.views.decorators.http import require_POST
import csv
import datetime
import pandas as pd

from academics.models import Department
from portal.decorators import role_required
from portal.utils import log_event
from .models import CustomUser as User


UPLOAD_COLUMNS = ["first_name", "last_name", "username", "email", "role", "department", "enrollment_no", "semester"]


def login_view(request):
    if request.user.is_authenticated:
        return redirect("portal:dashboard")

    if request.method == "POST":
        identifier = request.POST.get("username", "").strip()
        password = request.POST.get("password", "")

        # Accept either the username or the account email
        username = identifier
        if "@" in identifier:
            match = User.objects.filter(email__iexact=identifier).first()
            if match:
                username = match.username

        user = authenticate(request, username=username, password=password)

        if user is not None:
            login(request, user)
            log_event(user, "auth", f"{user.get_role_display()} login successful ({identifier})")

            next_url = request.POST.get("next") or request.GET.get("next")
            if next_url and url_has_allowed_host_and_scheme(next_url, allowed_hosts={request.get_host()}):
                return redirect(next_url)
            return redirect("portal:dashboard")

        log_event(None, "auth", f"Failed login attempt ({identifier})")
        messages.error(request, "Invalid credentials.")

    return render(request, "users/login.html", {"next": request.GET.get("next", "")})


def logout_view(request):
    if request.user.is_authenticated:
        log_event(request.user, "auth", f"Logout ({request.user.username})")
    logout(request)
    return redirect("login")


# ✅ Manage Users (Admin)
@role_required("admin")
def admin_manage_users(request):

    # ---------- CREATE USER ----------
    if request.method == "POST":
        first_name = request.POST.get("first_name", "").strip()
        last_name = request.POST.get("last_name", "").strip()
        email = request.POST.get("email", "").strip()
        password = request.POST.get("password", "").strip()
        role = request.POST.get("role", "").strip()
        department_id = request.POST.get("department", "").strip()

        # Validate
        if not (first_name and last_name and email and password and role):
            messages.error(request, "All fields are required.")
            return redirect("admin_manage_users")

        if role not in dict(User.ROLE_CHOICES):
            messages.error(request, f"Unknown role '{role}'.")
            return redirect("admin_manage_users")

        # Check duplicate email (also used as the username)
        if User.objects.filter(Q(email__iexact=email) | Q(username__iexact=email)).exists():
            messages.error(request, "A user with this email already exists.")
            return redirect("admin_manage_users")

        department = None
        if department_id:
            if department_id.isdigit():
                department = Department.objects.filter(pk=department_id).first()
            if department is None:
                messages.error(request, "Unknown department.")
                return redirect("admin_manage_users")

        user = User(
            first_name=first_name,
            last_name=last_name,
            email=email,
            role=role,
            username=email,
            department=department,
        )
        user.set_password(password)
        try:
            with transaction.atomic():
                user.save()
        except IntegrityError:
            messages.error(request, "Could not create this user. Check for duplicate details.")
            return redirect("admin_manage_users")

        log_event(request.user, "user", f"Created {role} account {email}")
        messages.success(request, f"{role.capitalize()} added successfully.")
        return redirect("admin_manage_users")

    # ---------- VIEW (GET) ----------
    users = User.objects.select_related("department").order_by("first_name", "last_name")

    # SEARCH
    search_query = request.GET.get("search", "")
    if search_query:
        users = users.filter(
            Q(first_name__icontains=search_query) |
            Q(last_name__icontains=search_query) |
            Q(email__icontains=search_query)
        )

    # FILTER BY ROLE
    role_filter = request.GET.get("role", "")
    if role_filter:
        users = users.filter(role=role_filter)

    # PAGINATION
    paginator = Paginator(users, 10)
    page_obj = paginator.get_page(request.GET.get("page"))

    return render(request, "users/admin_manage_users.html", {
        "page_obj": page_obj,
        "search": search_query,
        "role_filter": role_filter,
        "roles": User.ROLE_CHOICES,
        "departments": Department.objects.all(),
    })


@require_POST
@role_required("admin")
def toggle_user_active(request, id):
    user = get_object_or_404(User, id=id)

    if user.pk == request.user.pk:
        messages.error(request, "You cannot deactivate your own account.")
        return redirect("admin_manage_users")

    user.is_active = not user.is_active
    user.save(update_fields=["is_active"])

    state = "activated" if user.is_active else "deactivated"
    log_event(request.user, "user", f"User {user.username} {state}")
    messages.success(request, f"User {state} successfully.")
    return redirect("admin_manage_users")


# ---------- EXPORT CSV ----------
@role_required("admin")
def export_users_csv(request):
    response = HttpResponse(content_type="text/csv")
    response["Content-Disposition"] = 'attachment; filename="users.csv"'

    writer = csv.writer(response)
    writer.writerow(["First Name", "Last Name", "Email", "Role", "Department", "Active", "Date Joined"])

    for user in User.objects.select_related("department").order_by("role", "last_name"):
        writer.writerow([
            user.first_name,
            user.last_name,
            user.email,
            user.role,
            user.department.code if user.department else "",
            "yes" if user.is_active else "no",
            user.date_joined.strftime("%Y-%m-%d"),
        ])

    return response


# DATA UPLOAD
def generate_auto_password(first_name: str):
    if not first_name:
        first_name = "User"

    camel = first_name.strip().capitalize()
    year = datetime.datetime.now().year

    return f"@{camel}{year}"


@role_required("admin")
def upload_users(request):
    preview_data = request.session.get("preview_users")

    if request.method == "POST" and "file" in request.FILES:
        file = request.FILES["file"]

        # Load CSV/Excel
        try:
            filename = file.name.lower()
            if filename.endswith(".csv"):
                df = pd.read_csv(file, dtype=str).fillna("")
            elif filename.endswith(".xlsx"):
                df = pd.read_excel(file, dtype=str).fillna("")
            else:
                messages.error(request, "Please upload CSV or Excel file only.")
                return redirect("upload_users")
        except (ValueError, pd.errors.ParserError):
            messages.error(request, "Invalid file format.")
            return redirect("upload_users")

        df.columns = [str(c).strip().lower() for c in df.columns]
        missing = {"first_name", "email", "role"} - set(df.columns)
        if missing:
            messages.error(request, f"Missing column(s): {', '.join(sorted(missing))}")
            return redirect("upload_users")

        preview_data = df[[c for c in UPLOAD_COLUMNS if c in df.columns]].to_dict(orient="records")

        # Save to session temporarily
        request.session["preview_users"] = preview_data
        messages.success(request, "File uploaded. Preview below.")
        return redirect("upload_users")

    return render(request, "users/upload_users.html", {
        "preview": preview_data,
        "columns": UPLOAD_COLUMNS,
    })


def _user_from_row(row, departments):
    first_name = row.get("first_name", "").strip()
    last_name = row.get("last_name", "").strip()
    email = row.get("email", "").strip()
    username = row.get("username", "").strip() or email
    role = row.get("role", "").strip().lower()

    if not (first_name and email):
        raise ValueError(f"Row for '{email or first_name}' is missing first_name or email")
    if role not in dict(User.ROLE_CHOICES):
        raise ValueError(f"Unknown role '{role}' for {email}")

    dept_code = row.get("department", "").strip()
    department = departments.get(dept_code.upper()) if dept_code else None
    if dept_code and department is None:
        raise ValueError(f"Unknown department '{dept_code}' for {email}")

    semester = row.get("semester", "").strip()

    user = User(
        username=username,
        first_name=first_name,
        last_name=last_name,
        email=email,
        role=role,
        department=department,
        enrollment_no=row.get("enrollment_no", "").strip() or None,
        semester=int(semester) if semester else None,
    )
    user.set_password(generate_auto_password(first_name))
    return user


@require_POST
@role_required("admin")
def save_uploaded_users(request):
    preview_data = request.session.get("preview_users")

    if not preview_data:
        messages.error(request, "No data to save!")
        return redirect("upload_users")

    departments = {d.code.upper(): d for d in Department.objects.all()}
    created = 0
    errors = []

    for row in preview_data:
        try:
            user = _user_from_row(row, departments)
            with transaction.atomic():
                user.save()
            created += 1
        except (ValueError, IntegrityError) as e:
            errors.append(str(e))

    request.session["preview_users"] = None

    log_event(request.user, "user", f"Bulk upload saved {created} user(s)", meta={"errors": errors})
    messages.success(request, f"{created} users saved successfully.")
    if errors:
        messages.error(request, f"Errors: {errors}")

    return redirect("admin_manage_users")
