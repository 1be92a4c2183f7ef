"""
VerifyLicenseQuery.

Query to check whether a key is usable for a product right now.
"""
from dataclasses import dataclass


@dataclass
class VerifyLicenseQuery:
    """Query to verify a license key for a product."""

    key: str
    product: str
