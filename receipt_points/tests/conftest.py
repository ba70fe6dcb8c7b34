# tests/conftest.py
import pytest
from fastapi.testclient import TestClient

from receipt_points.main import create_app
from receipt_points.store.repository import InMemoryReceiptRepository

@pytest.fixture
def repository():
    return InMemoryReceiptRepository()

@pytest.fixture
def client(repository):
    return TestClient(create_app(repository=repository))
