"""Shared pytest fixtures and sample guards for typeguards tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

import pytest

from typeguards import UNDEFINED, TypeGuard, create_schema
from typeguards import TypeGuards as T
from typeguards.config.settings import get_settings

DEFAULT_BANNED: list[Any] = ["", 0, False, UNDEFINED, None, {}, []]


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Drop cached settings and TYPEGUARDS_* env vars around every test."""
    import os

    for name in list(os.environ):
        if name.startswith("TYPEGUARDS_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# ---------------------------------------------------------------------------
# Shared schemas (the person/job scenario used across schema test modules)
# ---------------------------------------------------------------------------


Age = T.Number.config(validate=lambda v: T.Number.validate(v) and v >= 0)

JOB_DEFINITION: dict[str, Any] = {
    "title": T.String,
    "salary": T.Nullable(T.Number),
}

JobSchema = T.Schema(JOB_DEFINITION)

PersonSchema = create_schema(
    lambda t: {
        "name": t.String,
        "age": Age,
        "alive": t.Boolean,
        "address": t.Optional(t.String),
        "favorites": t.Array(t.Union(t.String, t.Number)),
        "job": JobSchema,
    }
)


@pytest.fixture
def person() -> dict[str, Any]:
    return {
        "name": "John Doe",
        "age": 23,
        "alive": True,
        "address": UNDEFINED,
        "favorites": ["cat", "dog", 7],
        "job": {"title": "Dreamer", "salary": None},
    }


@pytest.fixture
def person_schema() -> TypeGuard:
    return PersonSchema
