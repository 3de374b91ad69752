"""Shared fixtures for the Spider Rainbow tests."""

import os

os.environ.setdefault("LOG_TO_FILE", "false")

import pytest
from fastapi.testclient import TestClient
from loguru import logger

from spider_rainbow.api import create_app


@pytest.fixture
def log_messages():
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())
