"""
AddLicenseCommand.

Command to add a license for a product.
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class AddLicenseCommand:
    """
    Command to add a license.

    key may be None or "random" to have one generated.
    """

    key: Optional[str]
    product: str
    owner_email: str
    owner_name: str
    expires_at: Optional[datetime] = None
