"""Shared request building and error-classification logic for sync and async clients."""

from __future__ import annotations

import logging
import math
from enum import Enum
from types import MappingProxyType
from typing import Mapping, TypeVar

from account_client.models import AuthenticationResult, User
from account_client.outcomes import (
    Err,
    LoginResult,
    LoginStatus,
    Ok,
    RecoveryResult,
    RecoveryStatus,
    RegistrationStatus,
    TokenStatus,
)
from account_client.transport import TransportFailure, TransportOutcome

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Enum)

LOGIN_PATH = "/api/auth/login/"
REGISTER_PATH = "/api/auth/register/"
RECOVER_PATH = "/api/auth/password-reset/"
RESET_PASSWORD_PATH = "/api/auth/confirm-password-reset/"
CONFIRM_EMAIL_PATH = "/api/auth/confirm-registration/"

# Server error code -> outcome, one table per operation. The same code can
# mean different things to different endpoints ("unknown_error" is bad
# credentials on login but a taken email on registration), so tables are
# never merged.
LOGIN_CODES: Mapping[str, LoginStatus] = MappingProxyType(
    {
        "login_failed": LoginStatus.INVALID_CREDENTIALS,
        "unknown_error": LoginStatus.INVALID_CREDENTIALS,
        "account_email_not_confirmed": LoginStatus.EMAIL_NOT_CONFIRMED,
    }
)
REGISTRATION_CODES: Mapping[str, RegistrationStatus] = MappingProxyType(
    {"unknown_error": RegistrationStatus.EMAIL_EXISTS}
)
RESET_PASSWORD_CODES: Mapping[str, TokenStatus] = MappingProxyType(
    {"invalid_token": TokenStatus.INVALID_TOKEN}
)
CONFIRM_EMAIL_CODES: Mapping[str, TokenStatus] = MappingProxyType(
    {"invalid_token": TokenStatus.INVALID_TOKEN}
)


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------


def login_body(email: str, password: str) -> dict:
    return {"email": email, "password": password}


def register_body(email: str, full_name: str, password: str) -> dict:
    return {"email": email, "password": password, "fullName": full_name}


def recover_body(email: str) -> dict:
    return {"email": email}


def reset_password_body(token: str, new_password: str) -> dict:
    return {"token": token, "newPassword": new_password}


def confirm_email_body(token: str) -> dict:
    return {"token": token}


# ---------------------------------------------------------------------------
# Response parsers
# ---------------------------------------------------------------------------


def _parse_user(data: dict) -> User:
    return User(
        email=data["email"],
        full_name=data["fullName"],
        date_joined=data["dateJoined"],
        current_education=data.get("currentEducation"),
        institution=data.get("institution"),
        phone_number=data.get("phoneNumber"),
        birth_date=data.get("birthDate"),
        address=data.get("address"),
    )


def _parse_authentication(data: dict) -> AuthenticationResult:
    token = data["token"]
    if not isinstance(token, str):
        raise TypeError(f"token must be a string, got {type(token).__name__}")
    exp = data["exp"]
    if isinstance(exp, bool) or not isinstance(exp, (int, float)):
        raise TypeError(f"exp must be a number, got {type(exp).__name__}")
    if not math.isfinite(exp):
        raise ValueError(f"exp must be finite, got {exp!r}")
    return AuthenticationResult(
        user=_parse_user(data["user"]),
        bearer_token=token,
        # seconds -> milliseconds
        expires_at=round(exp * 1000),
    )


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify(
    operation: str,
    failure: TransportFailure,
    codes: Mapping[str, S],
    fallback: S,
) -> Err[S]:
    """Resolve a transport failure to exactly one member of an operation's outcome set.

    Only a structured server response can match ``codes`` (exact,
    case-sensitive). Everything else, including unknown codes, becomes
    ``fallback`` carrying the failure's string form.
    """
    if failure.has_response and failure.code is not None:
        status = codes.get(failure.code)
        if status is not None:
            logger.debug("%s failed: %s (code=%s)", operation, status.name, failure.code)
            detail = failure.detail if failure.detail is not None else str(failure)
            return Err(status, detail)
    return unclassified(operation, failure, fallback)


def unclassified(operation: str, failure: TransportFailure, fallback: S) -> Err[S]:
    logger.warning(
        "%s failed: %s (status=%s, code=%s)",
        operation,
        failure,
        failure.status_code,
        failure.code,
    )
    return Err(fallback, str(failure))


def resolve_login(outcome: TransportOutcome) -> LoginResult:
    if isinstance(outcome, TransportFailure):
        return classify("login", outcome, LOGIN_CODES, LoginStatus.ERROR)
    try:
        return Ok(_parse_authentication(outcome.payload))
    except (KeyError, TypeError, ValueError) as exc:
        logger.warning("login returned a malformed payload: %r", exc)
        return Err(LoginStatus.ERROR, f"Malformed login response: {exc!r}")


def resolve_recover(outcome: TransportOutcome) -> RecoveryResult:
    # Never inspects the failure code: the caller must not learn whether the
    # email is registered.
    if isinstance(outcome, TransportFailure):
        return unclassified("recover", outcome, RecoveryStatus.FAILED)
    return Ok(None)


def resolve_void(
    operation: str,
    outcome: TransportOutcome,
    codes: Mapping[str, S],
    fallback: S,
) -> Ok[None] | Err[S]:
    if isinstance(outcome, TransportFailure):
        return classify(operation, outcome, codes, fallback)
    return Ok(None)
