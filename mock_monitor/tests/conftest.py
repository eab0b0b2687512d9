import pytest
from fastapi.testclient import TestClient

from mock_monitor.app import main


@pytest.fixture
def client():
    return TestClient(main.create_app())
