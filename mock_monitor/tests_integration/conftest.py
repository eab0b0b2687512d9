import httpx
import pytest_asyncio


@pytest_asyncio.fixture
async def client(mock_monitor_url):
    async with httpx.AsyncClient(base_url=mock_monitor_url, timeout=5.0) as c:
        yield c
