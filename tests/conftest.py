"""
Pytest configuration and shared fixtures.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

import pytest
from asgiref.sync import async_to_sync

from accounts.domain.account import Account
from accounts.infrastructure.repositories.django_account_repository import (
    DjangoAccountRepository,
)
from accounts.infrastructure.tokens import JWTTokenService
from accounts.ports.account_repository import AccountRepository
from core.config import ServiceConfig
from core.infrastructure.database import ConstraintViolation
from licenses.application.commands.add_license import AddLicenseCommand
from licenses.application.handlers.add_license_handler import AddLicenseHandler
from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License
from licenses.infrastructure.repositories.django_audit_log_repository import (
    DjangoAuditLogRepository,
)
from licenses.infrastructure.repositories.django_license_repository import DjangoLicenseRepository
from licenses.ports.audit_log_repository import AuditLogRepository
from licenses.ports.license_repository import LicenseRepository

TEST_JWT_SECRET = "unit-test-signing-secret"


class InMemoryLicenseRepository(LicenseRepository, AuditLogRepository):
    """License and audit log repository backed by dicts, for handler tests."""

    def __init__(self):
        self.licenses: Dict[Tuple[str, str], License] = {}
        self.audit_log: List[AuditLogEntry] = []

    async def add(self, license: License, audit_entry: AuditLogEntry) -> License:
        pair = (license.key, license.product)
        if pair in self.licenses:
            raise ConstraintViolation("uk_license_product")
        self.licenses[pair] = license
        self.audit_log.append(audit_entry)
        return license

    async def find_by_key_and_product(self, key: str, product: str) -> Optional[License]:
        return self.licenses.get((key, product))

    async def delete(self, key: str, product: str, audit_entry: AuditLogEntry) -> bool:
        if self.licenses.pop((key, product), None) is None:
            return False
        self.audit_log.append(audit_entry)
        return True

    async def list_by_product(self, product: str) -> List[License]:
        return [lic for (_, p), lic in self.licenses.items() if p == product]

    async def find_recent(self, limit: int) -> List[AuditLogEntry]:
        return list(reversed(self.audit_log))[:limit]


class InMemoryAccountRepository(AccountRepository):
    """Account repository backed by a dict, for handler tests."""

    def __init__(self):
        self.accounts: Dict[uuid.UUID, Account] = {}
        self.calls = 0
        self.fail_last_login_update = False

    async def add(self, account: Account) -> Account:
        self.calls += 1
        for existing in self.accounts.values():
            if existing.username == account.username or existing.email == account.email:
                raise ConstraintViolation("account unique")
        self.accounts[account.id] = account
        return account

    async def find_by_email(self, email: str) -> Optional[Account]:
        self.calls += 1
        return next((a for a in self.accounts.values() if a.email == email), None)

    async def find_by_id(self, account_id: uuid.UUID) -> Optional[Account]:
        self.calls += 1
        return self.accounts.get(account_id)

    async def update_last_login(self, account_id, at, ip_address) -> None:
        self.calls += 1
        if self.fail_last_login_update:
            from core.domain.exceptions import PersistenceError

            raise PersistenceError("account last login update failed")
        self.accounts[account_id] = self.accounts[account_id].record_login(ip_address, at)


@pytest.fixture
def memory_license_repository():
    """Fixture for an in-memory license and audit log repository."""
    return InMemoryLicenseRepository()


@pytest.fixture
def memory_account_repository():
    """Fixture for an in-memory account repository."""
    return InMemoryAccountRepository()


@pytest.fixture
def service_config():
    """Fixture for a ServiceConfig with a test secret."""
    return ServiceConfig(jwt_secret=TEST_JWT_SECRET)


@pytest.fixture
def token_service(service_config):
    """Fixture for JWTTokenService."""
    return JWTTokenService(service_config)


@pytest.fixture
def license_repository():
    """Fixture for LicenseRepository."""
    return DjangoLicenseRepository()


@pytest.fixture
def audit_log_repository():
    """Fixture for AuditLogRepository."""
    return DjangoAuditLogRepository()


@pytest.fixture
def account_repository():
    """Fixture for AccountRepository."""
    return DjangoAccountRepository()


@pytest.fixture
def fixed_now():
    """A fixed point in time, UTC."""
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def add_license(db, license_repository):
    """Fixture returning a helper that adds a license through the handler."""
    handler = AddLicenseHandler(license_repository)

    def _add(
        key="ABCD-1234-EFGH-5678",
        product="Demo",
        owner_email="a@b.com",
        owner_name="A B",
        expires_at=None,
    ):
        command = AddLicenseCommand(
            key=key,
            product=product,
            owner_email=owner_email,
            owner_name=owner_name,
            expires_at=expires_at,
        )
        return async_to_sync(handler.handle)(command)

    return _add


@pytest.fixture
def api_client():
    """Fixture for DRF API client."""
    from rest_framework.test import APIClient

    return APIClient()


@pytest.fixture
def registered_account(db):
    """Fixture for an account saved in database; password is 's3cret-pass'."""
    from django.contrib.auth.hashers import make_password

    from accounts.infrastructure.models import Account as AccountModel

    return AccountModel.objects.create(
        username="alice",
        email="alice@example.com",
        password_hash=make_password("s3cret-pass"),
    )


@pytest.fixture
def auth_client(api_client, registered_account):
    """Fixture for an API client carrying a valid bearer token."""
    from core.config import get_service_config

    token = JWTTokenService(get_service_config()).issue(registered_account.id)
    api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")
    return api_client
