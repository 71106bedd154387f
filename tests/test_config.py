import pytest

from openai_api import DEFAULT_BASE_URL, ClientConfig

_ENV = (
    "OPENAI_API_KEY",
    "OPENAI_API_BASE",
    "OPENAI_ORGANIZATION",
    "OPENAI_HTTP2",
    "OPENAI_POOL_IDLE_TIMEOUT",
    "OPENAI_REQUEST_TIMEOUT",
    "LOG_LEVEL",
)


def test_from_env_defaults(monkeypatch):
    for name in _ENV:
        monkeypatch.delenv(name, raising=False)

    config = ClientConfig.from_env()

    assert config == ClientConfig()
    assert config.base_url == DEFAULT_BASE_URL
    assert config.http2 is True
    assert config.pool_idle_timeout == 90.0
    assert config.organization is None


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_API_BASE", "http://proxy.local/v1")
    monkeypatch.setenv("OPENAI_ORGANIZATION", "org-7")
    monkeypatch.setenv("OPENAI_HTTP2", "false")
    monkeypatch.setenv("OPENAI_POOL_IDLE_TIMEOUT", "15")
    monkeypatch.setenv("OPENAI_REQUEST_TIMEOUT", "30.5")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    config = ClientConfig.from_env()

    assert config.api_key == "sk-env"
    assert config.base_url == "http://proxy.local/v1"
    assert config.organization == "org-7"
    assert config.http2 is False
    assert config.pool_idle_timeout == 15.0
    assert config.request_timeout == 30.5
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw, expected", [("1", True), ("On", True), ("no", False), (" 0 ", False)])
def test_http2_accepts_boolean_spellings(monkeypatch, raw, expected):
    monkeypatch.setenv("OPENAI_HTTP2", raw)

    assert ClientConfig.from_env().http2 is expected


def test_http2_rejects_unknown_value(monkeypatch):
    monkeypatch.setenv("OPENAI_HTTP2", "enable")

    with pytest.raises(ValueError, match="OPENAI_HTTP2='enable' is not a boolean"):
        ClientConfig.from_env()
