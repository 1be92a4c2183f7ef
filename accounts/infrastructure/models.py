"""
Account model.
"""
import uuid

from django.db import models


class Account(models.Model):
    """
    A registered account. Username and email are each unique.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    username = models.CharField(max_length=150, unique=True)
    email = models.EmailField(max_length=255, unique=True)
    password_hash = models.CharField(max_length=255)
    created_at = models.DateTimeField(auto_now_add=True)
    last_login = models.DateTimeField(null=True, blank=True)
    last_login_ip = models.GenericIPAddressField(null=True, blank=True)

    class Meta:
        db_table = "accounts"
        ordering = ["created_at"]

    def __str__(self):
        return self.username
