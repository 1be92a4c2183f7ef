"""
Login command.
"""
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class LoginCommand:
    """Command to authenticate an account by email and password."""

    email: str
    password: str = field(repr=False)
    ip_address: Optional[str] = None
