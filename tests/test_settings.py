"""Tests for API key resolution and availability."""

from app.config.settings import API_KEY_ENV_VARS, resolve_api_key, is_gemini_available


def test_no_sources_gives_none():
    assert resolve_api_key({}) is None
    assert is_gemini_available(resolve_api_key({})) is False


def test_empty_values_are_skipped():
    assert resolve_api_key({"API_KEY": "", "VITE_GEMINI_API_KEY": "", "GEMINI_API_KEY": ""}) is None


def test_first_source_wins():
    env = {"API_KEY": "one", "VITE_GEMINI_API_KEY": "two", "GEMINI_API_KEY": "three"}
    assert resolve_api_key(env) == "one"


def test_falls_through_in_order():
    assert resolve_api_key({"VITE_GEMINI_API_KEY": "two", "GEMINI_API_KEY": "three"}) == "two"
    assert resolve_api_key({"API_KEY": "", "GEMINI_API_KEY": "three"}) == "three"


def test_each_source_makes_gemini_available():
    for name in API_KEY_ENV_VARS:
        assert is_gemini_available(resolve_api_key({name: "secret"})) is True


def test_reads_process_environment_by_default(monkeypatch):
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    assert resolve_api_key() is None
    monkeypatch.setenv("GEMINI_API_KEY", "from-env")
    assert resolve_api_key() == "from-env"
