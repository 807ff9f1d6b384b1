"""Shared fixtures for carerix_webhooks tests."""

import os

import pytest

from carerix_webhooks.api.client import CarerixWebhooksClient
from carerix_webhooks.config.settings import CarerixConfig, OAuthConfig

AUTH_URL = "https://auth.test/oauth/token"
BASE_URL = "https://api.test/webhooks/v1"
APP_ID = "app-123"
WEBHOOKS_URL = f"{BASE_URL}/applications/{APP_ID}/webhooks"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Run every test without CX_* variables and outside the repo root."""
    for key in list(os.environ):
        if key.upper().startswith("CX_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def config():
    """Client configuration pointing at mocked endpoints."""
    return CarerixConfig(
        base_url=BASE_URL,
        application_id=APP_ID,
        oauth=OAuthConfig(
            auth_endpoint=AUTH_URL,
            client_id="client-id",
            client_secret="client-secret",
        ),
    )


@pytest.fixture
def client(config):
    """Client under test."""
    return CarerixWebhooksClient(config)


@pytest.fixture
def env_vars(monkeypatch):
    """Set the required CX_* variables."""
    monkeypatch.setenv("CX_AUTH_ENDPOINT", AUTH_URL)
    monkeypatch.setenv("CX_CLIENT_ID", "client-id")
    monkeypatch.setenv("CX_CLIENT_SECRET", "client-secret")
    monkeypatch.setenv("CX_APPLICATION_ID", APP_ID)
    monkeypatch.setenv("CX_BASE_URL", BASE_URL)
