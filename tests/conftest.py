"""Root conftest — shared test configuration and snapshot builders."""

import os

import pytest

from payments.core.domain_types import Account

# Ensure tests don't pick up a developer's .env logging setup
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "WARNING")


@pytest.fixture
def usd_accounts() -> list[Account]:
    """A1 (1000 USD) listed before B1 (200 USD)."""
    return [
        Account(id="A1", balance=1000, currency="USD"),
        Account(id="B1", balance=200, currency="USD"),
    ]
