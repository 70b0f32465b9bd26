import logging

from fastapi.testclient import TestClient

from app.core.config import settings
from app.core.database import get_table
from app.main import app
from fake_table import FailingTable

# ========== TEST HEALTH ==========
def test_healthz(client):
    response = client.get("/health/z")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "table": settings.TASK_TABLE_NAME}

# ========== TEST API ADD ==========
def test_api_add_task(client, repo):
    """Scénario: POST /api/Add -> id frais non vide, tâche visible ensuite"""
    response = client.post(
        "/api/Add",
        json={"TaskName": "X", "TaskDetails": "Y", "CompletionDate": "Z"}
    )
    assert response.status_code == 201
    message = response.json()
    assert isinstance(message, str)
    task_id = message.split("TaskID: ")[1]
    assert task_id

    tasks = repo.list_tasks()
    assert len(tasks) == 1
    assert tasks[0].TaskID == task_id
    assert tasks[0].TaskName == "X"
    assert tasks[0].TaskDetails == "Y"
    assert tasks[0].CompletionDate == "Z"


def test_api_add_generates_distinct_ids(client, repo):
    body = {"TaskName": "X", "TaskDetails": "Y", "CompletionDate": "Z"}
    first = client.post("/api/Add", json=body).json()
    second = client.post("/api/Add", json=body).json()
    assert first != second
    assert len(repo.list_tasks()) == 2


def test_api_add_missing_field(client, table):
    """Un body incomplet est rejeté (422), rien n'est écrit"""
    response = client.post("/api/Add", json={"TaskName": "X"})
    assert response.status_code == 422
    assert table.items == {}


def test_api_add_unknown_field(client, table):
    response = client.post(
        "/api/Add",
        json={"TaskName": "X", "TaskDetails": "Y", "CompletionDate": "Z", "Priority": "high"}
    )
    assert response.status_code == 422
    assert table.items == {}


def test_api_add_not_json(client, table):
    response = client.post("/api/Add", content="pas du json", headers={"Content-Type": "application/json"})
    assert response.status_code == 422

# ========== TEST API VIEW ALL ==========
def test_api_view_all_empty(client):
    """Table vide -> littéral JSON string"""
    response = client.get("/api/ViewAll")
    assert response.status_code == 200
    assert response.json() == "No tasks found."


def test_api_view_all(client):
    client.post("/api/Add", json={"TaskName": "T1", "TaskDetails": "D1", "CompletionDate": "2024-01-01"})
    client.post("/api/Add", json={"TaskName": "T2", "TaskDetails": "D2", "CompletionDate": "2024-02-01"})
    client.post("/api/Add", json={"TaskName": "T3", "TaskDetails": "D3", "CompletionDate": "2024-03-01"})

    response = client.get("/api/ViewAll")
    assert response.status_code == 200
    data = response.json()
    assert len(data) == 3
    assert {t["TaskName"] for t in data} == {"T1", "T2", "T3"}
    assert set(data[0].keys()) == {"TaskID", "TaskName", "TaskDetails", "CompletionDate"}

# ========== TEST API MODIFY ==========
def test_api_modify_overwrites(client, repo):
    client.post("/api/Add", json={"TaskName": "Old", "TaskDetails": "Old details", "CompletionDate": "2024-01-01"})
    task_id = repo.list_tasks()[0].TaskID

    response = client.post(
        "/api/Modify",
        json={"TaskID": task_id, "TaskName": "New", "TaskDetails": "", "CompletionDate": "2024-12-31"}
    )
    assert response.status_code == 200
    assert response.json()["TaskName"] == "New"

    tasks = repo.list_tasks()
    assert len(tasks) == 1
    assert tasks[0].TaskDetails == ""
    assert tasks[0].CompletionDate == "2024-12-31"


def test_api_modify_requires_all_fields(client):
    response = client.post("/api/Modify", json={"TaskID": "A", "TaskName": "New"})
    assert response.status_code == 422

# ========== TEST API DELETE ==========
def test_api_delete(client, repo):
    client.post("/api/Add", json={"TaskName": "X", "TaskDetails": "Y", "CompletionDate": "Z"})
    task_id = repo.list_tasks()[0].TaskID

    response = client.delete(f"/api/Delete/{task_id}")
    assert response.status_code == 204
    assert repo.list_tasks() == []


def test_api_delete_unknown_id(client):
    """Suppression idempotente"""
    response = client.delete("/api/Delete/inexistant")
    assert response.status_code == 204

# ========== TEST ERREURS STORE ==========
def test_store_failure_returns_500(table):
    app.dependency_overrides[get_table] = lambda: FailingTable()
    client = TestClient(app)

    response = client.get("/api/ViewAll")
    assert response.status_code == 500
    assert response.json() == {"detail": "Task store unavailable"}

    # le serveur continue de répondre
    assert client.get("/health/z").status_code == 200


def test_store_failure_logged_once(table, caplog):
    """Une seule ligne d'erreur par échec du store"""
    app.dependency_overrides[get_table] = lambda: FailingTable()
    client = TestClient(app)

    with caplog.at_level(logging.ERROR):
        response = client.get("/api/ViewAll")

    assert response.status_code == 500
    errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
    assert len(errors) == 1
    assert errors[0].name == "app.services.task_service"
