"""
License and AuditLog models.
"""
import uuid

from django.db import models


class License(models.Model):
    """
    A license grants an owner the use of one product under one key.
    The (license_key, product) pair is unique.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    license_key = models.CharField(max_length=255, db_index=True)
    product = models.CharField(max_length=255, db_index=True)
    expires_at = models.DateTimeField(null=True, blank=True)
    owner_email = models.EmailField(max_length=255, blank=True, default="")
    owner_name = models.CharField(max_length=255, blank=True, default="")
    is_activated = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "licenses"
        ordering = ["created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["license_key", "product"],
                name="uk_license_product",
            ),
        ]

    def __str__(self):
        return f"{self.license_key} - {self.product}"


class AuditLog(models.Model):
    """
    Immutable audit trail of license additions and deletions.
    """

    ACTION_CHOICES = [
        ("ADD", "Add"),
        ("DELETE", "Delete"),
    ]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    action = models.CharField(max_length=50, choices=ACTION_CHOICES)
    license_key = models.CharField(max_length=255, db_index=True)
    product = models.CharField(max_length=255)
    changed_at = models.DateTimeField(auto_now_add=True, db_index=True)
    details = models.TextField(blank=True, default="")

    class Meta:
        db_table = "audit_log"
        ordering = ["-changed_at"]

    def __str__(self):
        return f"{self.action} - {self.license_key} ({self.product})"
