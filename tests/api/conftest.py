"""API test fixtures — FastAPI app over httpx ASGITransport.

Design Decisions:
    - No lifespan run: logging setup is irrelevant to route behavior
"""

import pytest
from httpx import ASGITransport, AsyncClient

from payments.main import app


@pytest.fixture
async def client():
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def accounts_payload() -> list[dict]:
    return [
        {"id": "A1", "balance": 1000, "currency": "USD"},
        {"id": "B1", "balance": 200, "currency": "USD"},
    ]
