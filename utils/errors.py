"""
Error kinds raised by the authentication core and the request handlers.

There is a single exception type, AppError, tagged with an ErrorKind.
Callers branch on `err.kind`; the HTTP status for each kind lives in
api.errors.STATUS_BY_KIND.
"""
from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    MISSING_AUTHORIZATION = "MISSING_AUTHORIZATION"
    MALFORMED_AUTHORIZATION = "MALFORMED_AUTHORIZATION"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_OR_EXPIRED_REFRESH_TOKEN = "INVALID_OR_EXPIRED_REFRESH_TOKEN"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    NOT_FOUND = "NOT_FOUND"
    FORBIDDEN = "FORBIDDEN"
    CONFLICT = "CONFLICT"
    BAD_REQUEST = "BAD_REQUEST"


# Kinds that mean "the caller has to authenticate again".
REAUTHENTICATE_KINDS = frozenset(
    {
        ErrorKind.MISSING_AUTHORIZATION,
        ErrorKind.MALFORMED_AUTHORIZATION,
        ErrorKind.INVALID_TOKEN,
        ErrorKind.TOKEN_EXPIRED,
        ErrorKind.INVALID_OR_EXPIRED_REFRESH_TOKEN,
        ErrorKind.INVALID_CREDENTIALS,
    }
)


class AppError(Exception):
    def __init__(self, kind: ErrorKind, message: str = ""):
        super().__init__(message or kind.value)
        self.kind = kind
        self.message = message or kind.value

    def __repr__(self):
        return f"<AppError {self.kind.value}: {self.message}>"
