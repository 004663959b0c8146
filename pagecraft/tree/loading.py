"""Loading component trees from JSON data."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Union

from pydantic import TypeAdapter, ValidationError

from ..errors import TreeLoadError
from .models import Component

_TREE_ADAPTER = TypeAdapter(List[Component])


def load_tree(data: Any) -> List[Component]:
    """Validate raw tree data into an immutable list of root components.

    Accepts either a list of root nodes or a mapping with a ``components``
    list, which is the shape template data is stored in.
    """
    if isinstance(data, dict):
        if "components" not in data:
            raise TreeLoadError(
                "Tree data must be a list of components or contain a 'components' list",
                hint="Wrap root nodes in a JSON array",
            )
        data = data["components"]
    try:
        return _TREE_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise TreeLoadError(f"Invalid component tree: {exc.error_count()} validation error(s)\n{exc}") from exc


def load_tree_file(path: Union[str, Path]) -> List[Component]:
    source = Path(path)
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise TreeLoadError(f"Tree file not found: {source}") from exc
    except json.JSONDecodeError as exc:
        raise TreeLoadError(
            f"Tree file is not valid JSON: {source}:{exc.lineno}:{exc.colno}"
        ) from exc
    return load_tree(raw)


def dump_tree(tree: List[Component]) -> List[dict]:
    """Serialize a tree back to its camelCase wire form."""
    return _TREE_ADAPTER.dump_python(tree, by_alias=True, exclude_none=True)
