import os

from config.config import DEFAULT_OPENAI_MODEL, Settings

ENV_VARS = [
    "TAVILY_API_KEY",
    "OPENAI_API_KEY",
    "OPENAI_MODEL",
    "OPENAI_BASE_URL",
    "OPENAI_MAX_OUTPUT_TOKENS",
    "OPENAI_TEMPERATURE",
    "SEARCH_TIMEOUT_S",
    "OPENAI_TIMEOUT_S",
    "REQUIRE_STRUCTURED_OUTPUT",
    "CORS_ALLOW_ORIGINS",
]


def _clear(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_without_environment(monkeypatch, tmp_path):
    _clear(monkeypatch)
    settings = Settings.from_env(env_file=tmp_path / "missing.env")
    assert settings.tavily_api_key is None
    assert settings.openai_api_key is None
    assert settings.openai_model == DEFAULT_OPENAI_MODEL
    assert settings.openai_max_output_tokens == 800
    assert settings.require_structured_output is False
    assert settings.cors_allow_origins == ("*",)
    assert settings.missing_credentials() == ["TAVILY_API_KEY", "OPENAI_API_KEY"]


def test_values_from_environment(monkeypatch, tmp_path):
    _clear(monkeypatch)
    monkeypatch.setenv("TAVILY_API_KEY", "tvly-1")
    monkeypatch.setenv("OPENAI_API_KEY", "  ")
    monkeypatch.setenv("OPENAI_MODEL", "gpt-4.1-mini")
    monkeypatch.setenv("REQUIRE_STRUCTURED_OUTPUT", "TRUE")
    monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.app, https://b.app")

    settings = Settings.from_env(env_file=tmp_path / "missing.env")

    assert settings.tavily_api_key == "tvly-1"
    assert settings.openai_api_key is None
    assert settings.openai_model == "gpt-4.1-mini"
    assert settings.require_structured_output is True
    assert settings.cors_allow_origins == ("https://a.app", "https://b.app")
    assert settings.missing_credentials() == ["OPENAI_API_KEY"]


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    _clear(monkeypatch)
    # load_dotenv writes straight into os.environ
    monkeypatch.setattr(os, "environ", os.environ.copy())
    env_file = tmp_path / ".env"
    env_file.write_text("TAVILY_API_KEY=from-file\nSEARCH_TIMEOUT_S=4.5\n", encoding="utf-8")

    settings = Settings.from_env(env_file=env_file)

    assert settings.tavily_api_key == "from-file"
    assert settings.search_timeout_s == 4.5
