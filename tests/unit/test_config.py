import pytest

from basic_auth_guard.config import (
    Config,
    EnvironConfigFactory,
    GuardConfig,
    ServerConfig,
)


class TestEnvironConfigFactory:
    def test_defaults(self) -> None:
        config = EnvironConfigFactory(environ={}).create()
        assert config == Config(
            server=ServerConfig(host="0.0.0.0", port=8080),
            guard=GuardConfig(
                realm="Basic Auth Guard",
                encoding="utf-8",
                allow_multiple_headers=True,
                log_outcomes=False,
            ),
        )

    def test_custom(self) -> None:
        environ = {
            "BASIC_AUTH_GUARD_HOST": "127.0.0.1",
            "BASIC_AUTH_GUARD_PORT": "1234",
            "BASIC_AUTH_GUARD_REALM": "Staging",
            "BASIC_AUTH_GUARD_ENCODING": "latin-1",
            "BASIC_AUTH_GUARD_ALLOW_MULTIPLE_HEADERS": "false",
            "BASIC_AUTH_GUARD_LOG_OUTCOMES": "1",
        }
        config = EnvironConfigFactory(environ=environ).create()
        assert config == Config(
            server=ServerConfig(host="127.0.0.1", port=1234),
            guard=GuardConfig(
                realm="Staging",
                encoding="latin-1",
                allow_multiple_headers=False,
                log_outcomes=True,
            ),
        )

    @pytest.mark.parametrize(
        ("value", "expected"),
        (("yes", True), ("ON", True), (" True ", True), ("no", False), ("0", False)),
    )
    def test_bool_values(self, value: str, expected: bool) -> None:
        environ = {"BASIC_AUTH_GUARD_LOG_OUTCOMES": value}
        result = EnvironConfigFactory(environ).create_guard()
        assert result.log_outcomes is expected

    def test_invalid_bool(self) -> None:
        environ = {"BASIC_AUTH_GUARD_ALLOW_MULTIPLE_HEADERS": "maybe"}
        with pytest.raises(
            ValueError, match="BASIC_AUTH_GUARD_ALLOW_MULTIPLE_HEADERS must be a boolean"
        ):
            EnvironConfigFactory(environ).create_guard()

    def test_invalid_port(self) -> None:
        with pytest.raises(ValueError):
            EnvironConfigFactory({"BASIC_AUTH_GUARD_PORT": "http"}).create_server()

    def test_unknown_encoding(self) -> None:
        environ = {"BASIC_AUTH_GUARD_ENCODING": "no-such-codec"}
        with pytest.raises(LookupError):
            EnvironConfigFactory(environ).create_guard()

    def test_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("BASIC_AUTH_GUARD_REALM", "From Env")
        result = EnvironConfigFactory().create_guard()
        assert result.realm == "From Env"
