"""
Database utilities and transaction management.
"""

import contextlib
import logging
from typing import Iterator

from django.db import DatabaseError, IntegrityError, transaction

from core.domain.exceptions import PersistenceError

logger = logging.getLogger(__name__)


class ConstraintViolation(Exception):
    """
    Raised by repositories when a write breaks a uniqueness constraint.

    Django normalises driver errors into IntegrityError for every backend,
    so this signal does not depend on the storage engine's error text.
    """

    def __init__(self, constraint: str = ""):
        super().__init__(constraint or "constraint violation")
        self.constraint = constraint


@contextlib.contextmanager
def translate_db_errors(operation: str) -> Iterator[None]:
    """
    Map Django database errors to persistence-layer exceptions.

    Usage:
        with translate_db_errors("license insert"):
            # Database operations
            pass

    Args:
        operation: Short description used in the log line
    """
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolation(operation) from exc
    except DatabaseError as exc:
        logger.error("Database error during %s: %s", operation, exc, exc_info=True)
        raise PersistenceError(f"{operation} failed") from exc


@contextlib.contextmanager
def atomic_operation(operation: str) -> Iterator[None]:
    """
    Run a block in a single transaction with error translation.

    The transaction commits only if the whole block succeeds.
    """
    with translate_db_errors(operation):
        with transaction.atomic():
            yield
