"""
DeleteLicenseCommand.

Command to permanently delete a license.
"""
from dataclasses import dataclass


@dataclass
class DeleteLicenseCommand:
    """Command to delete the license for a (key, product) pair."""

    key: str
    product: str
