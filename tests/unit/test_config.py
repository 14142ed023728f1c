"""Tests for environment selection and settings."""

from __future__ import annotations

import pytest

from coinbase_pro import __version__
from coinbase_pro.config import DEFAULT_USER_AGENT, LIVE, SANDBOX, ClientSettings, Environment
from coinbase_pro.exceptions import ConfigurationError


def test_exactly_two_environments() -> None:
    assert {env.value for env in Environment} == {
        "https://api-public.sandbox.pro.coinbase.com",
        "https://api.pro.coinbase.com",
    }
    assert SANDBOX is Environment.SANDBOX
    assert LIVE is Environment.LIVE


def test_resolve_accepts_members_and_urls() -> None:
    assert Environment.resolve(Environment.LIVE) is Environment.LIVE
    assert Environment.resolve("https://api-public.sandbox.pro.coinbase.com") is Environment.SANDBOX


@pytest.mark.parametrize(
    "base",
    [
        "http://api.pro.coinbase.com",
        "https://api.pro.coinbase.com/",
        "https://api.exchange.coinbase.com",
        "",
    ],
)
def test_resolve_rejects_other_urls(base: str) -> None:
    with pytest.raises(ConfigurationError) as info:
        Environment.resolve(base)
    assert info.value.config_key == "base_url"


def test_settings_default_to_sandbox(monkeypatch) -> None:
    monkeypatch.delenv("COINBASE_SANDBOX", raising=False)
    monkeypatch.delenv("COINBASE_USER_AGENT", raising=False)
    settings = ClientSettings.from_env()
    assert settings.environment is Environment.SANDBOX
    assert settings.user_agent == DEFAULT_USER_AGENT
    assert __version__ in DEFAULT_USER_AGENT


@pytest.mark.parametrize("value,expected", [("false", Environment.LIVE), ("0", Environment.LIVE), ("YES", Environment.SANDBOX)])
def test_settings_sandbox_flag(monkeypatch, value: str, expected: Environment) -> None:
    monkeypatch.setenv("COINBASE_SANDBOX", value)
    assert ClientSettings.from_env().environment is expected


def test_settings_user_agent_override(monkeypatch) -> None:
    monkeypatch.setenv("COINBASE_USER_AGENT", "my-bot/1.0")
    assert ClientSettings.from_env().user_agent == "my-bot/1.0"
