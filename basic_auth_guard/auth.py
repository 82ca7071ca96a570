import base64
import logging
import re
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


logger = logging.getLogger(__name__)


BASIC_SCHEME = "basic"

_SCHEME_SEPARATOR = re.compile(r"[ \t]+")


class FailureKind(str, Enum):
    MISSING_HEADER = "missing_header"
    MISSING_BASIC_PREFIX = "missing_basic_prefix"
    INVALID_BASE64 = "invalid_base64"
    INVALID_UTF8 = "invalid_utf8"
    MISSING_COLON = "missing_colon"
    EMPTY_USERNAME = "empty_username"


class BasicAuthError(ValueError):
    kind: FailureKind

    def __init__(self, message: str, *, fragment: str = "") -> None:
        super().__init__(message)
        self.message = message
        self.fragment = fragment


class MissingHeaderError(BasicAuthError):
    kind = FailureKind.MISSING_HEADER


class MissingBasicPrefixError(BasicAuthError):
    kind = FailureKind.MISSING_BASIC_PREFIX


class InvalidBase64Error(BasicAuthError):
    kind = FailureKind.INVALID_BASE64


class InvalidUtf8Error(BasicAuthError):
    kind = FailureKind.INVALID_UTF8


class MissingColonError(BasicAuthError):
    kind = FailureKind.MISSING_COLON


class EmptyUsernameError(BasicAuthError):
    kind = FailureKind.EMPTY_USERNAME


@dataclass(frozen=True)
class Credentials:
    username: str
    password: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.username:
            raise ValueError("username must not be empty")
        if ":" in self.username:
            raise ValueError('a ":" is not allowed in username')

    def encode(self, encoding: str = "utf-8") -> str:
        """Render the value of an Authorization header for these credentials."""
        payload = f"{self.username}:{self.password}".encode(encoding)
        return "Basic " + base64.b64encode(payload).decode("ascii")

    @classmethod
    def from_authorization_header(
        cls, value: str | bytes | None, *, encoding: str = "utf-8"
    ) -> "Credentials":
        return parse_authorization_header(value, encoding=encoding)


ParseOutcome = Credentials | BasicAuthError
ParseObserver = Callable[[ParseOutcome], None]


def log_outcome(outcome: ParseOutcome) -> None:
    if isinstance(outcome, BasicAuthError):
        logger.debug("Basic credentials rejected: %s", outcome.kind.value)
    else:
        logger.debug("Basic credentials parsed for %r", outcome.username)


def parse_authorization_header(
    value: str | bytes | None,
    *,
    encoding: str = "utf-8",
    observer: ParseObserver | None = None,
) -> Credentials:
    """Parse the value of an Authorization header using the Basic scheme.

    ``value`` is ``None`` when the request carried no Authorization header.
    Raises a ``BasicAuthError`` subclass describing the first problem found;
    ``observer``, if given, is called once with either the credentials or the
    error before this function returns or raises.
    """
    try:
        credentials = _parse(value, encoding)
    except BasicAuthError as exc:
        if observer is not None:
            observer(exc)
        raise
    if observer is not None:
        observer(credentials)
    return credentials


def _parse(value: str | bytes | None, encoding: str) -> Credentials:
    if value is None:
        raise MissingHeaderError("authorization header is missing")
    if isinstance(value, bytes):
        value = value.decode("latin-1")

    match = _SCHEME_SEPARATOR.search(value)
    if match is None:
        raise MissingBasicPrefixError("no credentials after authentication type")
    auth_type = value[: match.start()]
    payload = value[match.end() :].rstrip(" \t")
    if not auth_type.isascii() or auth_type.lower() != BASIC_SCHEME:
        raise MissingBasicPrefixError(
            f'unexpected authentication type "{auth_type}"', fragment=auth_type
        )
    if not payload:
        raise MissingBasicPrefixError("no credentials after authentication type")

    try:
        decoded = base64.b64decode(payload, validate=True)
    except ValueError as exc:
        # binascii.Error, or a str payload with non-ASCII characters
        raise InvalidBase64Error(
            f"invalid base64 credentials payload: {exc}", fragment=str(exc)
        ) from exc

    try:
        text = decoded.decode(encoding)
    except UnicodeDecodeError as exc:
        raise InvalidUtf8Error(
            f"credentials payload is not valid {encoding}", fragment=exc.reason
        ) from exc

    username, separator, password = text.partition(":")
    if not separator:
        raise MissingColonError("no username/password separator in credentials")
    if not username:
        raise EmptyUsernameError("username is empty")
    return Credentials(username=username, password=password)
