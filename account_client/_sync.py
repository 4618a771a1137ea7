"""Synchronous account service client."""

from __future__ import annotations

import logging

from account_client._base import (
    CONFIRM_EMAIL_CODES,
    CONFIRM_EMAIL_PATH,
    LOGIN_PATH,
    RECOVER_PATH,
    REGISTER_PATH,
    REGISTRATION_CODES,
    RESET_PASSWORD_CODES,
    RESET_PASSWORD_PATH,
    confirm_email_body,
    login_body,
    recover_body,
    register_body,
    reset_password_body,
    resolve_login,
    resolve_recover,
    resolve_void,
)
from account_client.outcomes import (
    LoginResult,
    RecoveryResult,
    RegistrationResult,
    RegistrationStatus,
    TokenResult,
    TokenStatus,
)
from account_client.transport import (
    HttpxTransport,
    Transport,
    TransportOutcome,
    failure_from_error,
)

logger = logging.getLogger(__name__)


class AccountClient:
    """Synchronous client for the account service's authentication endpoints.

    Usage::

        with AccountClient("https://accounts.example.com") as client:
            result = client.login("user@example.com", "password123")
            auth = result.unwrap()  # raises LoginError on failure
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: Transport | None = None,
        **httpx_kwargs,
    ):
        if transport is not None and (base_url is not None or httpx_kwargs):
            raise ValueError("Pass either a transport or connection options, not both")
        self._owned_transport: HttpxTransport | None = None
        if transport is None:
            transport = self._owned_transport = HttpxTransport(base_url, **httpx_kwargs)
        self._transport = transport

    # -- context manager ------------------------------------------------

    def __enter__(self) -> AccountClient:
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owned_transport is not None:
            self._owned_transport.close()

    # -- helpers --------------------------------------------------------

    def _post(self, path: str, body: dict) -> TransportOutcome:
        try:
            return self._transport.send("POST", path, body)
        except Exception as exc:
            logger.exception("Transport raised for POST %s", path)
            return failure_from_error(exc)

    # ===================================================================
    # Operations
    # ===================================================================

    def login(self, email: str, password: str) -> LoginResult:
        return resolve_login(self._post(LOGIN_PATH, login_body(email, password)))

    def register(self, email: str, full_name: str, password: str) -> RegistrationResult:
        outcome = self._post(REGISTER_PATH, register_body(email, full_name, password))
        return resolve_void("register", outcome, REGISTRATION_CODES, RegistrationStatus.ERROR)

    def recover(self, email: str) -> RecoveryResult:
        return resolve_recover(self._post(RECOVER_PATH, recover_body(email)))

    def reset_password(self, token: str, new_password: str) -> TokenResult:
        outcome = self._post(RESET_PASSWORD_PATH, reset_password_body(token, new_password))
        return resolve_void("reset_password", outcome, RESET_PASSWORD_CODES, TokenStatus.ERROR)

    def confirm_email_address(self, token: str) -> TokenResult:
        outcome = self._post(CONFIRM_EMAIL_PATH, confirm_email_body(token))
        return resolve_void(
            "confirm_email_address", outcome, CONFIRM_EMAIL_CODES, TokenStatus.ERROR
        )
