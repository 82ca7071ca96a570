import pytest

from basic_auth_guard.config import Config, GuardConfig, ServerConfig


@pytest.fixture
def guard_config() -> GuardConfig:
    return GuardConfig(realm="Test Realm")


@pytest.fixture
def config(guard_config: GuardConfig) -> Config:
    return Config(server=ServerConfig(), guard=guard_config)
