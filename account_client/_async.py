"""Asynchronous account service client."""

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
    AsyncHttpxTransport,
    AsyncTransport,
    TransportOutcome,
    failure_from_error,
)

logger = logging.getLogger(__name__)


class AsyncAccountClient:
    """Asynchronous client for the account service's authentication endpoints.

    Every method returns an ``Ok`` or an ``Err`` value and never raises for
    HTTP or network problems. The client keeps no state between calls, so
    concurrent calls on one instance are independent.

    Usage::

        async with AsyncAccountClient("https://accounts.example.com") as client:
            result = await client.login("user@example.com", "password123")
            if result.is_ok:
                token = result.value.bearer_token
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        transport: AsyncTransport | None = None,
        **httpx_kwargs,
    ):
        if transport is not None and (base_url is not None or httpx_kwargs):
            raise ValueError("Pass either a transport or connection options, not both")
        self._owned_transport: AsyncHttpxTransport | None = None
        if transport is None:
            transport = self._owned_transport = AsyncHttpxTransport(base_url, **httpx_kwargs)
        self._transport = transport

    # -- context manager ------------------------------------------------

    async def __aenter__(self) -> AsyncAccountClient:
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying transport if this client created it."""
        if self._owned_transport is not None:
            await self._owned_transport.aclose()

    # -- helpers --------------------------------------------------------

    async def _post(self, path: str, body: dict) -> TransportOutcome:
        try:
            return await self._transport.send("POST", path, body)
        except Exception as exc:
            # Injected transports are expected to return failures, not raise.
            logger.exception("Transport raised for POST %s", path)
            return failure_from_error(exc)

    # ===================================================================
    # Operations
    # ===================================================================

    async def login(self, email: str, password: str) -> LoginResult:
        """Exchange credentials for a bearer token and the user's profile."""
        outcome = await self._post(LOGIN_PATH, login_body(email, password))
        return resolve_login(outcome)

    async def register(self, email: str, full_name: str, password: str) -> RegistrationResult:
        outcome = await self._post(REGISTER_PATH, register_body(email, full_name, password))
        return resolve_void("register", outcome, REGISTRATION_CODES, RegistrationStatus.ERROR)

    async def recover(self, email: str) -> RecoveryResult:
        """Request a password-reset email.

        Failures are reported only as ``RecoveryStatus.FAILED``; the result
        never reveals whether the address belongs to an account.
        """
        outcome = await self._post(RECOVER_PATH, recover_body(email))
        return resolve_recover(outcome)

    async def reset_password(self, token: str, new_password: str) -> TokenResult:
        outcome = await self._post(RESET_PASSWORD_PATH, reset_password_body(token, new_password))
        return resolve_void("reset_password", outcome, RESET_PASSWORD_CODES, TokenStatus.ERROR)

    async def confirm_email_address(self, token: str) -> TokenResult:
        outcome = await self._post(CONFIRM_EMAIL_PATH, confirm_email_body(token))
        return resolve_void(
            "confirm_email_address", outcome, CONFIRM_EMAIL_CODES, TokenStatus.ERROR
        )
