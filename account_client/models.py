"""Dataclass response models for the account service API."""

from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timezone


@dataclass(frozen=True)
class User:
    email: str
    full_name: str
    date_joined: int
    current_education: str | None = None
    institution: str | None = None
    phone_number: str | None = None
    birth_date: str | None = None
    address: str | None = None


@dataclass(frozen=True)
class AuthenticationResult:
    """A logged-in user together with the bearer token issued for them.

    ``expires_at`` is an absolute instant in milliseconds since the epoch.
    Storing and renewing the token is up to the caller.
    """

    user: User
    bearer_token: str
    expires_at: int

    @property
    def expires(self) -> datetime:
        return datetime.fromtimestamp(self.expires_at / 1000, tz=timezone.utc)

    def is_expired(self, now: int | None = None) -> bool:
        """Return True once ``now`` (epoch milliseconds, default: current time) reaches expiry."""
        if now is None:
            now = int(time.time() * 1000)
        return now >= self.expires_at
