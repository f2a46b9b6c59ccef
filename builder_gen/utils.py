"""Utility functions for loading class descriptions.

A class description is a JSON object produced by whatever front-end parsed
the Java source::

    {
      "name": "Point",
      "kind": "class",
      "fields": [
        {"name": "x", "type": "int", "final": true},
        {"name": "SCALE", "type": "int", "declaration": "private static int SCALE = 2;"}
      ],
      "members": [
        {"kind": "constructor", "name": "Point", "parameters": ["int"], "source": "..."}
      ]
    }

A field is static when ``"static": true`` is given, or otherwise when its raw
``declaration`` carries the static modifier.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from .core.filters import is_static_declaration
from .core.model import ClassKind, FieldDescriptor, MemberDescriptor, MemberKind
from .languages.java.class_model import InMemoryClassModel
from .languages.java.types import TypeRenderer, render_verbatim
from .logging_config import get_logger

logger = get_logger(__name__)


class DescriptorLoadError(Exception):
    """Custom exception for class description loading errors."""

    pass


def parse_field(data: Dict[str, Any]) -> FieldDescriptor:
    """Build a field descriptor from its JSON form.

    Raises:
        DescriptorLoadError: If name or type is missing.
    """
    if not isinstance(data, dict):
        raise DescriptorLoadError(f"Field entry must be an object: {data!r}")

    try:
        name = data["name"]
        type_name = data["type"]
    except KeyError as e:
        raise DescriptorLoadError(f"Field entry is missing {e}: {data!r}") from e

    if "static" in data:
        is_static = bool(data["static"])
    else:
        is_static = is_static_declaration(data.get("declaration", ""))

    return FieldDescriptor(
        name=name,
        type_name=type_name,
        is_static=is_static,
        is_final=bool(data.get("final", False)),
    )


def parse_member(data: Dict[str, Any]) -> MemberDescriptor:
    """Build an existing member from its JSON form.

    Raises:
        DescriptorLoadError: If kind or name is missing or invalid.
    """
    if not isinstance(data, dict):
        raise DescriptorLoadError(f"Member entry must be an object: {data!r}")

    try:
        kind = MemberKind(data.get("kind", "method"))
        name = data["name"]
    except ValueError as e:
        raise DescriptorLoadError(f"Invalid member kind: {data.get('kind')}") from e
    except KeyError as e:
        raise DescriptorLoadError(f"Member entry is missing {e}: {data!r}") from e

    return MemberDescriptor(
        kind=kind,
        name=name,
        parameter_types=tuple(data.get("parameters", ())),
        source=data.get("source", ""),
    )


def parse_class_model(
    data: Dict[str, Any],
    indent: str = "    ",
    path: Optional[Path] = None,
    type_renderer: TypeRenderer = render_verbatim,
) -> InMemoryClassModel:
    """Build an in-memory class model from a JSON class description.

    Args:
        data: Decoded JSON object.
        indent: Indentation used when rendering the class.
        path: File the transformed class is written to, if any.
        type_renderer: Turns field type names into source text.

    Returns:
        Class model ready for builder generation.

    Raises:
        DescriptorLoadError: If the description is malformed.
    """
    if not isinstance(data, dict):
        raise DescriptorLoadError("Class description must be a JSON object")

    name = data.get("name")
    if not name:
        raise DescriptorLoadError("Class description is missing 'name'")

    try:
        kind = ClassKind(data.get("kind", "class"))
    except ValueError as e:
        raise DescriptorLoadError(f"Invalid class kind: {data.get('kind')}") from e

    fields: List[FieldDescriptor] = [parse_field(f) for f in data.get("fields", [])]
    members: List[MemberDescriptor] = [parse_member(m) for m in data.get("members", [])]

    logger.debug(
        "Parsed class %s: %d field(s), %d member(s)", name, len(fields), len(members)
    )
    return InMemoryClassModel(
        name,
        fields=fields,
        members=members,
        kind=kind,
        indent=indent,
        path=path,
        type_renderer=type_renderer,
    )


def load_class_description(file_path: str | Path) -> Dict[str, Any]:
    """Load a JSON class description from a file, or from stdin for ``-``.

    Raises:
        FileNotFoundError: If file doesn't exist.
        DescriptorLoadError: If file cannot be read or JSON is invalid.
    """
    if str(file_path) == "-":
        try:
            return json.load(sys.stdin)
        except json.JSONDecodeError as e:
            raise DescriptorLoadError(f"Invalid JSON on stdin: {e}") from e

    file_path = Path(file_path)
    logger.debug("Loading class description from %s", file_path)

    if not file_path.exists():
        logger.error("File not found: %s", file_path)
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        with file_path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in file %s: %s", file_path, e)
        raise DescriptorLoadError(f"Invalid JSON in file {file_path}: {e}") from e
    except OSError as e:
        logger.error("Error reading file %s: %s", file_path, e)
        raise DescriptorLoadError(f"Error reading file {file_path}: {e}") from e

    logger.info("Loaded class description from %s", file_path)
    return data
