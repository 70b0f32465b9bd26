import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))
sys.path.insert(0, str(Path(__file__).parent))

import pytest
from fastapi.testclient import TestClient

from app.core.database import get_table
from app.main import app
from app.services.task_service import TaskRepository
from fake_table import FakeTable


@pytest.fixture
def table():
    """Table en mémoire, neuve pour chaque test"""
    fake = FakeTable()
    app.dependency_overrides[get_table] = lambda: fake
    yield fake
    app.dependency_overrides.clear()


@pytest.fixture
def repo(table):
    return TaskRepository(table)


@pytest.fixture
def client(table):
    """Client de test FastAPI branché sur la table en mémoire"""
    return TestClient(app)
