from django.db import models
from django.conf import settings


class Department(models.Model):
    name = models.CharField(max_length=100, unique=True)
    code = models.CharField(max_length=20, unique=True)
    description = models.TextField(blank=True, null=True)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["name"]

    def __str__(self):
        return self.name


class Subject(models.Model):
    name = models.CharField(max_length=200)
    code = models.CharField(max_length=20, unique=True)

    department = models.ForeignKey(
        Department,
        on_delete=models.CASCADE,
        related_name="subjects"
    )

    semester = models.PositiveIntegerField(default=1)
    credits = models.PositiveIntegerField(default=3)

    faculty = models.ManyToManyField(
        settings.AUTH_USER_MODEL,
        blank=True,
        limit_choices_to={"role": "faculty"},
        related_name="subjects_taught"
    )

    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["department__name", "semester", "code"]

    def __str__(self):
        return f"{self.code} - {self.name}"


class SubjectColorMap(models.Model):
    """Persistent color slot for a subject, shared by every timetable view."""

    subject = models.OneToOneField(
        Subject,
        on_delete=models.CASCADE,
        related_name="color_map"
    )
    color_index = models.PositiveIntegerField()

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["color_index"]

    def __str__(self):
        return f"{self.subject.code} -> {self.color_index}"
