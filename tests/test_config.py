import os

import pytest

os.environ.setdefault("LOG_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "_logs"))

from techmeme_digest.config.settings import load_run_config
from techmeme_digest.errors import ConfigError

FULL_ENV = {
    "GEMINI_API_KEY": "gem-key",
    "SLACK_BOT_TOKEN": "xoxb-1-2-abc",
    "SLACK_CHANNEL_ID": "C0123",
}


def test_load_run_config_defaults_model():
    cfg = load_run_config(FULL_ENV)
    assert cfg.api_key == "gem-key"
    assert cfg.channel_token == "xoxb-1-2-abc"
    assert cfg.channel_id == "C0123"
    assert cfg.model_name == "gemini-pro-latest"
    assert cfg.http_timeout == 30.0


def test_load_run_config_reads_optional_values():
    env = dict(FULL_ENV, GEMINI_MODEL="gemini-2.5-flash", HTTP_TIMEOUT_SEC="12.5")
    cfg = load_run_config(env)
    assert cfg.model_name == "gemini-2.5-flash"
    assert cfg.http_timeout == 12.5


def test_blank_model_falls_back_to_default():
    cfg = load_run_config(dict(FULL_ENV, GEMINI_MODEL="  "))
    assert cfg.model_name == "gemini-pro-latest"


@pytest.mark.parametrize("key", sorted(FULL_ENV))
def test_each_missing_required_key_is_named(key):
    env = {k: v for k, v in FULL_ENV.items() if k != key}
    with pytest.raises(ConfigError) as exc_info:
        load_run_config(env)
    assert exc_info.value.missing == (key,)
    assert key in str(exc_info.value)


def test_empty_and_whitespace_values_count_as_missing():
    env = dict(FULL_ENV, GEMINI_API_KEY="", SLACK_CHANNEL_ID="   ")
    with pytest.raises(ConfigError) as exc_info:
        load_run_config(env)
    assert exc_info.value.missing == ("GEMINI_API_KEY", "SLACK_CHANNEL_ID")


@pytest.mark.parametrize("raw", ["abc", "0", "-3", "nan", "inf", "-inf"])
def test_invalid_timeout_rejected(raw):
    with pytest.raises(ConfigError):
        load_run_config(dict(FULL_ENV, HTTP_TIMEOUT_SEC=raw))


def test_reads_process_environment_by_default(monkeypatch):
    for k, v in FULL_ENV.items():
        monkeypatch.setenv(k, v)
    monkeypatch.delenv("GEMINI_MODEL", raising=False)
    monkeypatch.delenv("HTTP_TIMEOUT_SEC", raising=False)
    assert load_run_config().channel_id == "C0123"
