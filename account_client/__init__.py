"""Account Service Python Client SDK."""

from account_client._async import AsyncAccountClient
from account_client._sync import AccountClient
from account_client.config import ClientSettings
from account_client.exceptions import (
    AccountServiceError,
    EmailTokenError,
    LoginError,
    RecoveryError,
    RegistrationError,
)
from account_client.models import AuthenticationResult, User
from account_client.outcomes import (
    Err,
    LoginResult,
    LoginStatus,
    Ok,
    RecoveryResult,
    RecoveryStatus,
    RegistrationResult,
    RegistrationStatus,
    TokenResult,
    TokenStatus,
)
from account_client.transport import (
    AsyncHttpxTransport,
    HttpxTransport,
    TransportFailure,
    TransportSuccess,
)

__all__ = [
    "AccountClient",
    "AsyncAccountClient",
    "ClientSettings",
    "AsyncHttpxTransport",
    "HttpxTransport",
    "TransportSuccess",
    "TransportFailure",
    "Ok",
    "Err",
    "LoginResult",
    "RegistrationResult",
    "RecoveryResult",
    "TokenResult",
    "LoginStatus",
    "RegistrationStatus",
    "RecoveryStatus",
    "TokenStatus",
    "AccountServiceError",
    "LoginError",
    "RegistrationError",
    "RecoveryError",
    "EmailTokenError",
    "User",
    "AuthenticationResult",
]
