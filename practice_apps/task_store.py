"""Task records kept in a MongoDB collection."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

DEFAULT_URI = "mongodb://localhost:27017"
DEFAULT_DATABASE = "task_management_api"
DEFAULT_COLLECTION = "tasks"


@dataclass
class Task:
    """A task in the task manager."""

    id: str = ""
    title: str = ""
    description: str = ""
    due_date: str = ""
    status: str = ""


class TaskStoreError(Exception):
    """Raised when the task collection cannot carry out an operation."""


class TaskNotFound(TaskStoreError, LookupError):
    """Raised when no task has the requested id."""


def _to_document(task: Task) -> dict[str, str]:
    return {
        "id": task.id,
        "title": task.title,
        "description": task.description,
        "duedate": task.due_date,
        "status": task.status,
    }


def _from_document(document: dict[str, Any]) -> Task:
    return Task(
        id=document.get("id", ""),
        title=document.get("title", ""),
        description=document.get("description", ""),
        due_date=document.get("duedate", ""),
        status=document.get("status", ""),
    )


class TaskStore:
    """Reads and writes tasks in a collection, matching them on their ``id`` field."""

    def __init__(self, collection: Any) -> None:
        self.collection = collection

    def all(self) -> list[Task]:
        """Every task in the collection."""
        try:
            return [_from_document(document) for document in self.collection.find({})]
        except PyMongoError as exc:
            raise TaskStoreError("failed to list tasks") from exc

    def get(self, task_id: str) -> Task:
        """The task with the given id."""
        try:
            document = self.collection.find_one({"id": task_id})
        except PyMongoError as exc:
            raise TaskStoreError("failed to fetch task") from exc
        if document is None:
            raise TaskNotFound("task not found")
        return _from_document(document)

    def create(self, task: Task) -> None:
        """Insert a task as a new document."""
        try:
            result = self.collection.insert_one(_to_document(task))
        except PyMongoError as exc:
            raise TaskStoreError("failed to create task") from exc
        logger.info("Inserted a single document: %s", result.inserted_id)

    def update(self, task_id: str, task: Task) -> None:
        """Replace the title, description, due date and status of a task."""
        changes = _to_document(task)
        del changes["id"]
        try:
            result = self.collection.update_one({"id": task_id}, {"$set": changes})
        except PyMongoError as exc:
            raise TaskStoreError("failed to update task") from exc
        if result.matched_count == 0:
            raise TaskNotFound("task not found")

    def delete(self, task_id: str) -> None:
        """Remove the task with the given id."""
        try:
            result = self.collection.delete_one({"id": task_id})
        except PyMongoError as exc:
            raise TaskStoreError("failed to delete task") from exc
        if result.deleted_count == 0:
            raise TaskNotFound("task not found")


def connect(
    uri: str = DEFAULT_URI,
    database: str = DEFAULT_DATABASE,
    collection: str = DEFAULT_COLLECTION,
) -> TaskStore:
    """Open a client on ``uri`` and return a store over the named collection."""
    client: MongoClient = MongoClient(uri)
    print("Connected to Db!")
    return TaskStore(client[database][collection])