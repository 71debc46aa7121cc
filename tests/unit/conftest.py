# tests/unit/conftest.py
"""Shared fixtures: sample schemas, a scripted provider client, logging isolation."""

import logging

import pytest

from boilr.config import BoilrConfig, Provider
from boilr.schema import AbstractSchema


class FakeClient:
    """StructuredClient stand-in that replays scripted replies and records calls."""

    provider = Provider.OPENAI
    model = "fake-model"

    def __init__(self, replies):
        self.replies = list(replies)
        self.calls: list[dict] = []
        self.closed = False

    async def generate_structured(self, system, prompt, schema, name):
        self.calls.append({"system": system, "prompt": prompt, "schema": schema, "name": name})
        reply = self.replies.pop(0)
        if isinstance(reply, BaseException):
            raise reply
        return reply

    async def close(self):
        self.closed = True


@pytest.fixture(autouse=True)
def _restore_root_logging():
    """The CLI reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def fake_client():
    """Factory: fake_client(reply1, reply2, ...) -> FakeClient."""
    return lambda *replies: FakeClient(replies)


@pytest.fixture
def openai_config():
    return BoilrConfig.for_provider(Provider.OPENAI, "sk-test")


@pytest.fixture
def todo_schema_dict():
    """users + tasks, as a model would return it."""
    return {
        "models": [
            {
                "name": "users",
                "fields": [
                    {"name": "id", "type": "serial", "primaryKey": True, "notNull": True},
                    {"name": "email", "type": "varchar", "notNull": True, "unique": True},
                    {"name": "created_at", "type": "timestamp", "default": "now()"},
                ],
            },
            {
                "name": "tasks",
                "fields": [
                    {"name": "id", "type": "serial", "primaryKey": True, "notNull": True},
                    {"name": "title", "type": "text", "notNull": True},
                    {
                        "name": "assignee_id",
                        "type": "integer",
                        "references": {"model": "users", "field": "id"},
                    },
                ],
            },
        ]
    }


@pytest.fixture
def revised_schema_dict(todo_schema_dict):
    """todo_schema_dict with tasks.due_date added."""
    models = [dict(m, fields=list(m["fields"])) for m in todo_schema_dict["models"]]
    models[1]["fields"].append({"name": "due_date", "type": "date"})
    return {"models": models}


@pytest.fixture
def todo_schema(todo_schema_dict):
    return AbstractSchema.model_validate(todo_schema_dict)
