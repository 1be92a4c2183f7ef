"""
Django model discovery for the accounts app.
"""
from accounts.infrastructure.models import Account  # noqa: F401
