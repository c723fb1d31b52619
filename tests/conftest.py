"""Automatically run by pytest to set up test infrastructure."""

import pytest
import requests_mock
from fastapi.testclient import TestClient

from discord_relay.config import Config
from discord_relay.main import create_app

DEV_WEBHOOK_URL = "https://discord.test/api/webhooks/dev/token"
TEST_WEBHOOK_URL = "https://discord.test/api/webhooks/test/token"


@pytest.fixture
def requests_mocker():
    """Make requests_mock available as a fixture."""
    mocker = requests_mock.Mocker(real_http=False, case_sensitive=True)
    mocker.start()
    try:
        yield mocker
    finally:
        mocker.stop()


@pytest.fixture
def discord(requests_mocker):
    """Both Discord channel webhooks, accepting every message."""
    requests_mocker.post(DEV_WEBHOOK_URL, status_code=204)
    requests_mocker.post(TEST_WEBHOOK_URL, status_code=204)
    return requests_mocker


@pytest.fixture
def config():
    return Config(dev_webhook_url=DEV_WEBHOOK_URL, test_webhook_url=TEST_WEBHOOK_URL)


@pytest.fixture
def client(config):
    return TestClient(create_app(config))


def pull_request_payload(action="opened", merged=False, state="open"):
    return {
        "action": action,
        "pull_request": {
            "number": 42,
            "title": "Fix bug",
            "html_url": "http://x/42",
            "merged": merged,
            "state": state,
        },
        "sender": {"login": "alice", "html_url": "http://x/alice"},
        "repository": {"full_name": "org/repo", "html_url": "http://x"},
    }


def workflow_run_payload(action="completed", conclusion="success"):
    return {
        "action": action,
        "workflow_run": {
            "name": "CI",
            "status": "completed" if action == "completed" else action,
            "conclusion": conclusion,
            "html_url": "http://x/run",
        },
        "sender": {"login": "alice", "html_url": "http://x/alice"},
        "repository": {"full_name": "org/repo", "html_url": "http://x"},
    }
