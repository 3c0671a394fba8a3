import pytest

CONFIG_VARS = [
    "DATABASE_URL",
    "CONSUMER_NAME",
    "QUEUE_NAME",
    "POLL_INTERVAL",
    "REQUEST_TIMEOUT",
    "MAX_CONCURRENT_JOBS",
    "TABLE_NAME",
    "RETRY_POLICY",
    "BACKOFF_COEFFICIENT",
    "INITIAL_INTERVAL",
    "MAXIMUM_INTERVAL",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Process environment with none of the consumer variables set."""
    for name in CONFIG_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
