"""HTTP interface for managing tasks."""

from __future__ import annotations

import argparse
import json
import logging
import uuid
from typing import Any

from flask import Flask, jsonify, request

from .task_store import DEFAULT_URI, Task, TaskStore, TaskStoreError, connect

logger = logging.getLogger(__name__)

_JSON_FIELDS = {
    "ID": "id",
    "Title": "title",
    "Description": "description",
    "DueDate": "due_date",
    "Status": "status",
}
_FIELDS_BY_KEY = {key.lower(): attribute for key, attribute in _JSON_FIELDS.items()}


def _task_to_json(task: Task) -> dict[str, str]:
    return {key: getattr(task, attribute) for key, attribute in _JSON_FIELDS.items()}


def _task_from_json(data: Any) -> Task:
    """Build a task from a decoded JSON body; keys match field names ignoring case."""
    if data is None:
        return Task()
    if not isinstance(data, dict):
        raise ValueError("task must be a JSON object")
    values: dict[str, str] = {}
    for key, value in data.items():
        attribute = _FIELDS_BY_KEY.get(key.lower())
        if attribute is None or value is None:
            continue
        if not isinstance(value, str):
            raise ValueError(f"{key} must be a string")
        values[attribute] = value
    return Task(**values)


def _read_task() -> Task:
    try:
        return _task_from_json(json.loads(request.get_data()))
    except ValueError as exc:
        raise _InvalidInput from exc


class _InvalidInput(Exception):
    pass


def create_app(store: TaskStore) -> Flask:
    """Build the application serving the ``/tasks`` routes over ``store``."""
    app = Flask(__name__)

    @app.errorhandler(_InvalidInput)
    def invalid_input(_: _InvalidInput):
        return jsonify({"error": "Invalid input"}), 400

    @app.get("/tasks")
    def list_tasks():
        return jsonify([_task_to_json(task) for task in store.all()]), 200

    @app.get("/tasks/<task_id>")
    def get_task(task_id: str):
        try:
            task = store.get(task_id)
        except TaskStoreError:
            return jsonify({"error": "Task not found"}), 404
        return jsonify(_task_to_json(task)), 200

    @app.post("/tasks")
    def create_task():
        task = _read_task()
        task.id = str(uuid.uuid4())
        try:
            store.create(task)
        except TaskStoreError:
            logger.exception("could not store task %s", task.id)
        return jsonify({"message": "Task created successfully"}), 201

    @app.put("/tasks/<task_id>")
    def update_task(task_id: str):
        task = _read_task()
        try:
            store.update(task_id, task)
        except TaskStoreError:
            return jsonify({"error": "Task not found"}), 404
        return jsonify({"message": "Task updated successfully"}), 200

    @app.delete("/tasks/<task_id>")
    def delete_task(task_id: str):
        try:
            store.delete(task_id)
        except TaskStoreError:
            return jsonify({"error": "Task not found"}), 404
        return jsonify({"message": "Task deleted successfully!"}), 200

    return app


def main(argv: list[str] | None = None) -> int:
    """Connect to the database and serve the task API."""
    parser = argparse.ArgumentParser(description="Serve the task management API.")
    parser.add_argument("--host", default="0.0.0.0")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--mongo-uri", default=DEFAULT_URI)
    args = parser.parse_args(argv)
    store = connect(args.mongo_uri)
    create_app(store).run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())