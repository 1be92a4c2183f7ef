"""
License repository port (interface).

This defines the contract for license persistence operations.
Implementations are in the infrastructure layer.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from licenses.domain.audit_log import AuditLogEntry
from licenses.domain.license import License


class LicenseRepository(ABC):
    """
    Abstract repository for License entities.

    This is a port in hexagonal architecture - it defines
    what operations are available, not how they're implemented.
    Every mutation takes the audit entry to append with it; the two
    writes happen in one transaction.
    """

    @abstractmethod
    async def add(self, license: License, audit_entry: AuditLogEntry) -> License:
        """
        Insert a license and its audit entry atomically.

        Args:
            license: License entity to insert
            audit_entry: ADD audit entry

        Returns:
            Saved license entity

        Raises:
            ConstraintViolation: If (key, product) already exists
            PersistenceError: On any other storage failure
        """
        pass

    @abstractmethod
    async def find_by_key_and_product(self, key: str, product: str) -> Optional[License]:
        """
        Find a license by key and product.

        Args:
            key: License key string
            product: Product name

        Returns:
            License entity or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, key: str, product: str, audit_entry: AuditLogEntry) -> bool:
        """
        Delete a license and append its audit entry atomically.

        Args:
            key: License key string
            product: Product name
            audit_entry: DELETE audit entry

        Returns:
            True if a row was deleted, False if none matched (nothing written)
        """
        pass

    @abstractmethod
    async def list_by_product(self, product: str) -> List[License]:
        """
        List all licenses for a product in insertion order.

        Args:
            product: Product name

        Returns:
            List of License entities
        """
        pass
