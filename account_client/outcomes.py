"""Closed outcome sets and the Ok/Err result values returned by every operation.

Each operation resolves to exactly one of::

    Ok(value)              # success
    Err(status, detail)    # status is a member of that operation's enum

so callers branch on the status instead of on transport details::

    match await client.login(email, password):
        case Ok(auth):
            store(auth.bearer_token)
        case Err(LoginStatus.EMAIL_NOT_CONFIRMED, detail):
            show_confirm_prompt(detail)
        case Err(_, detail):
            show_error(detail)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Generic, NoReturn, TypeVar

from account_client.exceptions import (
    AccountServiceError,
    EmailTokenError,
    LoginError,
    RecoveryError,
    RegistrationError,
)
from account_client.models import AuthenticationResult

T = TypeVar("T")
S = TypeVar("S", bound=Enum)


class LoginStatus(Enum):
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_NOT_CONFIRMED = "email_not_confirmed"
    ERROR = "error"


class RegistrationStatus(Enum):
    EMAIL_EXISTS = "email_exists"
    ERROR = "error"


class RecoveryStatus(Enum):
    # Recovery never reports why it failed; see AsyncAccountClient.recover.
    FAILED = "failed"


class TokenStatus(Enum):
    INVALID_TOKEN = "invalid_token"
    ERROR = "error"


_ERRORS: dict[type[Enum], type[AccountServiceError]] = {
    LoginStatus: LoginError,
    RegistrationStatus: RegistrationError,
    RecoveryStatus: RecoveryError,
    TokenStatus: EmailTokenError,
}


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    is_ok: ClassVar[bool] = True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err(Generic[S]):
    status: S
    detail: str

    is_ok: ClassVar[bool] = False

    def unwrap(self) -> NoReturn:
        """Raise the operation's exception type carrying this status and detail."""
        raise _ERRORS[type(self.status)](self.status, self.detail)


LoginResult = Ok[AuthenticationResult] | Err[LoginStatus]
RegistrationResult = Ok[None] | Err[RegistrationStatus]
RecoveryResult = Ok[None] | Err[RecoveryStatus]
TokenResult = Ok[None] | Err[TokenStatus]
