# portal/models.py
# Shared models for every dashboard: the notice board, per-user notifications
# and the audit log.

import uuid

from django.db import models
from django.conf import settings
from django.utils import timezone


class SystemLog(models.Model):
    CATEGORY_CHOICES = [
        ("system", "System"),
        ("auth", "Authentication"),
        ("notice", "Notice"),
        ("notification", "Notification"),
        ("user", "User Management"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True, blank=True,
        related_name="system_logs"
    )

    category = models.CharField(
        max_length=50,
        choices=CATEGORY_CHOICES,
        default="system"
    )

    message = models.TextField()

    meta = models.TextField(
        null=True,
        blank=True,
        help_text="Optional metadata or extra context (JSON/text)."
    )

    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-timestamp"]

    def __str__(self):
        return f"[{self.category}] {self.message[:50]}"


class Notice(models.Model):
    TYPE_CHOICES = [
        ("ACADEMIC", "Academic"),
        ("EVENT", "Event"),
        ("EXAM", "Exam"),
        ("GENERAL", "General"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    title = models.CharField(max_length=200)
    content = models.TextField()
    type = models.CharField(max_length=10, choices=TYPE_CHOICES, default="GENERAL")
    is_important = models.BooleanField(default=False)

    published_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(null=True, blank=True)

    # Optional banner image hosted elsewhere
    image_url = models.URLField(max_length=500, blank=True, null=True)

    # Restricts notification fan-out; the notice itself stays visible to everyone
    department = models.ForeignKey(
        "academics.Department",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="notices"
    )

    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notices"
    )

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-is_important", "-published_at"]

    def __str__(self):
        return self.title

    def is_expired(self, now=None):
        now = now or timezone.now()
        return self.expires_at is not None and self.expires_at <= now


class Notification(models.Model):
    TYPE_CHOICES = [
        ("ATTENDANCE", "Attendance"),
        ("NOTICE", "Notice"),
        ("EVENT", "Event"),
        ("SYSTEM", "System"),
    ]

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="notifications"
    )

    type = models.CharField(max_length=12, choices=TYPE_CHOICES, default="SYSTEM")
    title = models.CharField(max_length=200)
    message = models.TextField()
    link = models.CharField(max_length=500, blank=True, null=True)
    is_read = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["is_read", "-created_at"]

    def __str__(self):
        return f"{self.user} - {self.title}"
