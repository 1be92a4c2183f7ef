"""
Register account command.
"""
from dataclasses import dataclass, field


@dataclass
class RegisterAccountCommand:
    """Command to register an account."""

    username: str
    email: str
    password: str = field(repr=False)
    password_repeat: str = field(repr=False)
