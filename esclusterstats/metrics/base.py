"""Shared types and the JSON path extractor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Sequence


class JsonKind(str, Enum):
    OBJECT = "object"
    ARRAY = "array"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ABSENT = "absent"


class PathFailure(str, Enum):
    NOT_AN_OBJECT = "not an object"
    NOT_NUMERIC = "not numeric"


@dataclass(frozen=True)
class Extraction:
    """Outcome of resolving one path against a stats document."""
    value: float | None = None
    failure: PathFailure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None


# Marks a missing key so it can be told apart from a JSON null.
_ABSENT = object()


def json_kind(node: Any) -> JsonKind:
    """Classify a decoded JSON node."""
    if node is _ABSENT:
        return JsonKind.ABSENT
    if node is None:
        return JsonKind.NULL
    # bool before int: True is an int in Python
    if isinstance(node, bool):
        return JsonKind.BOOLEAN
    if isinstance(node, (int, float)):
        return JsonKind.NUMBER
    if isinstance(node, str):
        return JsonKind.STRING
    if isinstance(node, dict):
        return JsonKind.OBJECT
    if isinstance(node, list):
        return JsonKind.ARRAY
    return JsonKind.ABSENT


def extract_value(tree: Any, path: Sequence[str]) -> Extraction:
    """Walk *tree* along *path* and return the number at its end.

    Every step but the last must land on an object, otherwise the result
    fails with ``NOT_AN_OBJECT``. The last step must land on a number,
    otherwise it fails with ``NOT_NUMERIC``.
    """
    if not path:
        raise ValueError("path must not be empty")

    cursor = tree
    if json_kind(cursor) is not JsonKind.OBJECT:
        return Extraction(failure=PathFailure.NOT_AN_OBJECT)

    for key in path[:-1]:
        cursor = cursor.get(key, _ABSENT)
        if json_kind(cursor) is not JsonKind.OBJECT:
            return Extraction(failure=PathFailure.NOT_AN_OBJECT)

    leaf = cursor.get(path[-1], _ABSENT)
    if json_kind(leaf) is not JsonKind.NUMBER:
        return Extraction(failure=PathFailure.NOT_NUMERIC)
    try:
        return Extraction(value=float(leaf))
    except OverflowError:
        # JSON integers are unbounded, float64 is not
        return Extraction(failure=PathFailure.NOT_NUMERIC)
