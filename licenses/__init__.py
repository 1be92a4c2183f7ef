"""
Licenses module - License and audit log management.

This module handles:
- License entity and domain logic
- Adding, deleting and listing licenses per product
- License verification (not found / expired)
- Append-only audit log of license mutations
"""
