"""
Authentication Package

Credential validation, registration and login against an AccountStore.
"""

from .service import AuthenticationService, validate_credentials

__all__ = [
    "AuthenticationService",
    "validate_credentials",
]
