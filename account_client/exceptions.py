"""Typed exception hierarchy for callers that prefer raising over results.

Operations never raise these themselves; they are produced by
``Err.unwrap()`` when a caller opts into exception-style handling.
"""

from __future__ import annotations

from enum import Enum


class AccountServiceError(Exception):
    """Base exception for all account service errors."""

    def __init__(self, status: Enum, detail: str):
        self.status = status
        self.detail = detail
        super().__init__(detail)


class LoginError(AccountServiceError):
    """Raised for a failed login (invalid credentials, unconfirmed email, other)."""


class RegistrationError(AccountServiceError):
    """Raised for a failed registration (email exists, other)."""


class RecoveryError(AccountServiceError):
    """Raised when a password-recovery request fails for any reason."""


class EmailTokenError(AccountServiceError):
    """Raised when a password-reset or email-confirmation token is rejected."""
