"""Shared pytest fixtures for the builder_gen test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from builder_gen import (
    ClassDescriptor,
    FieldDescriptor,
    GeneratorConfig,
    InMemoryClassModel,
    JavaBuilderGenerator,
)


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


@pytest.fixture
def point_fields() -> list[FieldDescriptor]:
    """The Point fields: two instance fields and one static constant."""
    return [
        FieldDescriptor(name="x", type_name="int"),
        FieldDescriptor(name="y", type_name="int"),
        FieldDescriptor(name="SCALE", type_name="int", is_static=True),
    ]


@pytest.fixture
def point_descriptor(point_fields) -> ClassDescriptor:
    return ClassDescriptor(name="Point", fields=point_fields)


@pytest.fixture
def point_model(point_fields) -> InMemoryClassModel:
    """A Point class with fields only."""
    return InMemoryClassModel("Point", fields=point_fields)


# ---------------------------------------------------------------------------
# Generators
# ---------------------------------------------------------------------------


@pytest.fixture
def config() -> GeneratorConfig:
    return GeneratorConfig()


@pytest.fixture
def generator(config) -> JavaBuilderGenerator:
    return JavaBuilderGenerator(config)


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


@pytest.fixture
def point_json(tmp_path: Path) -> Path:
    """A JSON class description of Point on disk."""
    path = tmp_path / "point.json"
    path.write_text(
        json.dumps(
            {
                "name": "Point",
                "kind": "class",
                "fields": [
                    {"name": "x", "type": "int", "final": True},
                    {"name": "y", "type": "int", "final": True},
                    {
                        "name": "SCALE",
                        "type": "int",
                        "declaration": "private static final int SCALE = 2;",
                    },
                ],
            }
        ),
        encoding="utf-8",
    )
    return path
