import codecs
import logging

from aiohttp import hdrs
from aiohttp.web import AppKey, Application, HTTPUnauthorized, Request
from neuro_logging import trace

from .auth import (
    BasicAuthError,
    Credentials,
    ParseObserver,
    log_outcome,
    parse_authorization_header,
)
from .config import GuardConfig


logger = logging.getLogger(__name__)


class MultipleHeadersError(Exception):
    def __init__(self, count: int) -> None:
        super().__init__(f"expected one authorization header, got {count}")
        self.count = count


class BasicAuthGuard:
    def __init__(self, config: GuardConfig) -> None:
        self._config = config
        self._observer: ParseObserver | None = (
            log_outcome if config.log_outcomes else None
        )

    @property
    def config(self) -> GuardConfig:
        return self._config

    @property
    def challenge(self) -> str:
        realm = self._config.realm.replace("\\", "\\\\").replace('"', '\\"')
        challenge = f'Basic realm="{realm}"'
        if codecs.lookup(self._config.encoding).name == "utf-8":
            challenge += ', charset="UTF-8"'
        return challenge

    def unauthorized(self) -> HTTPUnauthorized:
        return HTTPUnauthorized(headers={hdrs.WWW_AUTHENTICATE: self.challenge})

    def extract(self, request: Request) -> Credentials:
        values = request.headers.getall(hdrs.AUTHORIZATION, [])
        if len(values) > 1 and not self._config.allow_multiple_headers:
            raise MultipleHeadersError(len(values))
        return parse_authorization_header(
            values[0] if values else None,
            encoding=self._config.encoding,
            observer=self._observer,
        )


GUARD: AppKey[BasicAuthGuard] = AppKey("basic_auth_guard", BasicAuthGuard)


def setup_basic_auth(app: Application, config: GuardConfig) -> BasicAuthGuard:
    guard = BasicAuthGuard(config)
    app[GUARD] = guard
    return guard


@trace
async def get_credentials(request: Request) -> Credentials:
    guard = request.config_dict[GUARD]
    try:
        return guard.extract(request)
    except (BasicAuthError, MultipleHeadersError) as exc:
        logger.info("Unauthorized request to %s: %s", request.path, exc)
        raise guard.unauthorized() from exc
