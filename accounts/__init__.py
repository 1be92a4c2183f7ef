"""
Accounts module - Account registration and authentication.

This module handles:
- Account entity and domain logic
- Registration with salted, adaptive password hashing
- Login with generic credential errors
- Bearer token (JWT) issuance and verification
"""
