import json
import uuid
from types import SimpleNamespace

import pytest

from practice_apps.task_api import create_app
from practice_apps.task_store import TaskStore


def _matches(document, query):
    return all(document.get(key) == value for key, value in query.items())


class FakeCollection:
    def __init__(self):
        self.docs = []

    def find(self, query):
        return [dict(doc) for doc in self.docs if _matches(doc, query)]

    def find_one(self, query):
        return next((dict(doc) for doc in self.docs if _matches(doc, query)), None)

    def insert_one(self, document):
        document = dict(document)
        document["_id"] = len(self.docs) + 1
        self.docs.append(document)
        return SimpleNamespace(inserted_id=document["_id"])

    def update_one(self, query, update):
        for doc in self.docs:
            if _matches(doc, query):
                doc.update(update["$set"])
                return SimpleNamespace(matched_count=1)
        return SimpleNamespace(matched_count=0)

    def delete_one(self, query):
        for doc in self.docs:
            if _matches(doc, query):
                self.docs.remove(doc)
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)


@pytest.fixture
def client():
    app = create_app(TaskStore(FakeCollection()))
    return app.test_client()


def create(client, body):
    return client.post("/tasks", data=json.dumps(body), content_type="application/json")


def only_task(client):
    tasks = client.get("/tasks").get_json()
    assert len(tasks) == 1
    return tasks[0]


def test_list_empty(client):
    response = client.get("/tasks")
    assert response.status_code == 200
    assert response.get_json() == []


def test_create_task(client):
    response = create(client, {"Title": "Write", "Description": "Report", "DueDate": "soon", "Status": "open"})
    assert response.status_code == 201
    assert response.get_json() == {"message": "Task created successfully"}
    task = only_task(client)
    assert task["Title"] == "Write"
    assert task["Description"] == "Report"
    assert task["DueDate"] == "soon"
    assert task["Status"] == "open"
    assert uuid.UUID(task["ID"]).version == 4


def test_create_replaces_given_id(client):
    create(client, {"ID": "custom", "Title": "Write"})
    task = only_task(client)
    assert uuid.UUID(task["ID"]).version == 4
    assert task["Title"] == "Write"


def test_create_matches_keys_ignoring_case(client):
    create(client, {"title": "lower", "duedate": "later"})
    task = only_task(client)
    assert task["Title"] == "lower"
    assert task["DueDate"] == "later"


@pytest.mark.parametrize("body", [b"not json", b"", b"[1, 2]", b'{"Title": 5}'])
def test_create_invalid_input(client, body):
    response = client.post("/tasks", data=body, content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid input"}
    assert client.get("/tasks").get_json() == []


def test_get_task_by_id(client):
    create(client, {"Title": "Write"})
    task = only_task(client)
    response = client.get(f"/tasks/{task['ID']}")
    assert response.status_code == 200
    assert response.get_json() == task


def test_get_missing_task(client):
    response = client.get("/tasks/missing")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Task not found"}


def test_update_task(client):
    create(client, {"Title": "Write"})
    task_id = only_task(client)["ID"]
    response = client.put(
        f"/tasks/{task_id}",
        data=json.dumps({"Title": "Edit", "Status": "done"}),
        content_type="application/json",
    )
    assert response.status_code == 200
    assert response.get_json() == {"message": "Task updated successfully"}
    updated = client.get(f"/tasks/{task_id}").get_json()
    assert updated["Title"] == "Edit"
    assert updated["Status"] == "done"
    assert updated["ID"] == task_id


def test_update_missing_task(client):
    response = client.put("/tasks/missing", data=json.dumps({"Title": "x"}), content_type="application/json")
    assert response.status_code == 404
    assert response.get_json() == {"error": "Task not found"}


def test_update_invalid_input(client):
    response = client.put("/tasks/any", data=b"{", content_type="application/json")
    assert response.status_code == 400
    assert response.get_json() == {"error": "Invalid input"}


def test_delete_task(client):
    create(client, {"Title": "Write"})
    task_id = only_task(client)["ID"]
    response = client.delete(f"/tasks/{task_id}")
    assert response.status_code == 200
    assert response.get_json() == {"message": "Task deleted successfully!"}
    assert client.get("/tasks").get_json() == []
    again = client.delete(f"/tasks/{task_id}")
    assert again.status_code == 404
    assert again.get_json() == {"error": "Task not found"}