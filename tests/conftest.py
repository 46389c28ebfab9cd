# tests/conftest.py

import pytest

from academics.models import Department, Subject
from portal.models import Notice


@pytest.fixture
def department(db):
    return Department.objects.create(name="Computer Science", code="CSE")


@pytest.fixture
def other_department(db):
    return Department.objects.create(name="Mathematics", code="MTH")


@pytest.fixture
def make_user(django_user_model):
    def _make(username, role, **extra):
        extra.setdefault("email", f"{username}@campus.test")
        return django_user_model.objects.create_user(
            username=username, password="pass-1234", role=role, **extra
        )
    return _make


@pytest.fixture
def admin_user(make_user):
    return make_user("admin", "admin", first_name="Ada", last_name="Admin")


@pytest.fixture
def faculty_user(make_user, department):
    return make_user("prof", "faculty", first_name="Paul", last_name="Prof", department=department)


@pytest.fixture
def student_user(make_user, department):
    return make_user("stu", "student", first_name="Sam", last_name="Student", department=department, semester=1)


@pytest.fixture
def subjects(department, faculty_user):
    created = [
        Subject.objects.create(name="Data Structures", code="CS101", department=department, semester=1),
        Subject.objects.create(name="Discrete Maths", code="CS102", department=department, semester=1),
        Subject.objects.create(name="Operating Systems", code="CS201", department=department, semester=2),
    ]
    for s in created:
        s.faculty.add(faculty_user)
    return created


@pytest.fixture
def notice(admin_user):
    return Notice.objects.create(
        title="Library hours",
        content="The library stays open until midnight during exams.",
        author=admin_user,
    )


@pytest.fixture
def client_for(client):
    def _login(user):
        client.force_login(user)
        return client
    return _login
