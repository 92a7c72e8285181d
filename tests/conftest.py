import pytest
from fastapi.testclient import TestClient

from application.use_cases import TaskUseCases
from infrastructure.task_store import TaskStore
from interfaces.api import get_use_cases
from main import app


@pytest.fixture
def store():
    """A fresh store with the three seed tasks."""
    return TaskStore()


@pytest.fixture
def empty_store():
    return TaskStore(seed=False)


@pytest.fixture
def use_cases(store):
    return TaskUseCases(store)


@pytest.fixture
def client(use_cases):
    app.dependency_overrides[get_use_cases] = lambda: use_cases
    yield TestClient(app)
    app.dependency_overrides.clear()
