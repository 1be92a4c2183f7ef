"""
GetLicenseQuery.
"""
from dataclasses import dataclass


@dataclass
class GetLicenseQuery:
    """Query to fetch one license by key and product."""

    key: str
    product: str
