from __future__ import annotations

import codecs
import os
from dataclasses import dataclass


_TRUE_VALUES = frozenset(("1", "true", "yes", "on"))
_FALSE_VALUES = frozenset(("0", "false", "no", "off"))


@dataclass(frozen=True)
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8080


@dataclass(frozen=True)
class GuardConfig:
    realm: str = "Basic Auth Guard"
    encoding: str = "utf-8"
    # the first Authorization header wins unless this is disabled
    allow_multiple_headers: bool = True
    log_outcomes: bool = False


@dataclass(frozen=True)
class Config:
    server: ServerConfig
    guard: GuardConfig


class EnvironConfigFactory:
    def __init__(self, environ: dict[str, str] | None = None) -> None:
        self._environ = os.environ if environ is None else environ

    def _get_bool(self, name: str, default: bool) -> bool:
        value = self._environ.get(name)
        if value is None:
            return default
        value = value.strip().lower()
        if value in _TRUE_VALUES:
            return True
        if value in _FALSE_VALUES:
            return False
        raise ValueError(f"{name} must be a boolean, got {value!r}")

    def create_server(self) -> ServerConfig:
        host = self._environ.get("BASIC_AUTH_GUARD_HOST", ServerConfig.host)
        port = int(self._environ.get("BASIC_AUTH_GUARD_PORT", ServerConfig.port))
        return ServerConfig(host=host, port=port)

    def create_guard(self) -> GuardConfig:
        realm = self._environ.get("BASIC_AUTH_GUARD_REALM", GuardConfig.realm)
        encoding = self._environ.get("BASIC_AUTH_GUARD_ENCODING", GuardConfig.encoding)
        codecs.lookup(encoding)
        return GuardConfig(
            realm=realm,
            encoding=encoding,
            allow_multiple_headers=self._get_bool(
                "BASIC_AUTH_GUARD_ALLOW_MULTIPLE_HEADERS",
                GuardConfig.allow_multiple_headers,
            ),
            log_outcomes=self._get_bool(
                "BASIC_AUTH_GUARD_LOG_OUTCOMES", GuardConfig.log_outcomes
            ),
        )

    def create(self) -> Config:
        return Config(server=self.create_server(), guard=self.create_guard())
