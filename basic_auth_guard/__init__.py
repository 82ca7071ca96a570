from .auth import (
    BasicAuthError,
    Credentials,
    EmptyUsernameError,
    FailureKind,
    InvalidBase64Error,
    InvalidUtf8Error,
    MissingBasicPrefixError,
    MissingColonError,
    MissingHeaderError,
    parse_authorization_header,
)


__all__ = (
    "BasicAuthError",
    "Credentials",
    "EmptyUsernameError",
    "FailureKind",
    "InvalidBase64Error",
    "InvalidUtf8Error",
    "MissingBasicPrefixError",
    "MissingColonError",
    "MissingHeaderError",
    "parse_authorization_header",
)
