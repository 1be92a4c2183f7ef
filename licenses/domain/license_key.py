"""
License key generation.
"""

import secrets
import string

KEY_ALPHABET = string.ascii_uppercase + string.digits
KEY_GROUPS = 4
KEY_GROUP_SIZE = 4

# CLI / API sentinel asking for a generated key
RANDOM_KEY = "random"


def generate_license_key() -> str:
    """
    Generate a license key in format: XXXX-XXXX-XXXX-XXXX.

    Characters are drawn uniformly from A-Z0-9 using the secrets CSPRNG.

    Returns:
        Generated license key string
    """
    parts = [
        "".join(secrets.choice(KEY_ALPHABET) for _ in range(KEY_GROUP_SIZE))
        for _ in range(KEY_GROUPS)
    ]
    return "-".join(parts)


def resolve_license_key(requested: str = None) -> str:
    """
    Return the requested key, or a generated one for None / "" / "random".

    Args:
        requested: Key supplied by the caller

    Returns:
        License key string (not validated)
    """
    if not requested or requested.strip().lower() == RANDOM_KEY:
        return generate_license_key()
    return requested.strip()
