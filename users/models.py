from django.contrib.auth.models import AbstractUser
from django.db import models
from academics.models import Department


class CustomUser(AbstractUser):
    ROLE_CHOICES = [
        ('admin', 'Admin'),
        ('faculty', 'Faculty'),
        ('student', 'Student'),
    ]
    role = models.CharField(max_length=10, choices=ROLE_CHOICES, default='student')

    department = models.ForeignKey(
        Department,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="members"
    )

    avatar = models.URLField(max_length=500, blank=True, null=True)

    # STUDENT-RELATED FIELDS
    enrollment_no = models.CharField(max_length=20, unique=True, null=True, blank=True)
    semester = models.PositiveIntegerField(null=True, blank=True)

    def __str__(self):
        return f"{self.username} ({self.role})"

    @property
    def display_name(self):
        return self.get_full_name() or self.username
