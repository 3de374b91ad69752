"""Tests for the server entry point."""

import sys

import pytest
import uvicorn

from spider_rainbow import main as entry
from spider_rainbow.core.config import config
from spider_rainbow.core.logger import log


@pytest.fixture
def restore_config():
    saved = (config.api_host, config.api_port, config.log_level)
    yield
    config.api_host, config.api_port = saved[0], saved[1]
    log.set_level(saved[2])


@pytest.fixture
def uvicorn_calls(monkeypatch) -> list[dict]:
    calls: list[dict] = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append(kwargs))
    return calls


def test_cli_flags_override_config(restore_config, monkeypatch, capsys, uvicorn_calls) -> None:
    monkeypatch.setattr(sys, "argv", ["spider-rainbow", "--host", "127.0.0.1", "--port", "8123", "--log-level", "debug"])

    entry.main()

    assert config.api_host == "127.0.0.1"
    assert config.api_port == 8123
    assert config.log_level == "DEBUG"
    assert uvicorn_calls == [{"host": "127.0.0.1", "port": 8123, "log_level": "debug"}]

    log.debug("zone debug line")
    assert "zone debug line" in capsys.readouterr().out


def test_config_is_validated_before_serving(restore_config, monkeypatch, uvicorn_calls) -> None:
    monkeypatch.setattr(sys, "argv", ["spider-rainbow", "--port", "0"])

    with pytest.raises(ValueError, match="API port"):
        entry.main()
    assert uvicorn_calls == []
