"""
Shared fixtures
"""
import pytest
from fastapi.testclient import TestClient

from judging import state
from judging.core.store import ScoreStore
from judging.main import app


@pytest.fixture
def store():
    """Store with 3 categories, 3 experts and no teams"""
    s = ScoreStore()
    for name in ["Innovation", "Technical Merit", "Presentation"]:
        s.add_category(name)
    for name in ["Expert 1", "Expert 2", "Expert 3"]:
        s.add_expert(name)
    return s


@pytest.fixture
def client(store, monkeypatch):
    """API client bound to a fresh store (lifespan not run)"""
    monkeypatch.setattr(state, "STORE", store)
    return TestClient(app)
