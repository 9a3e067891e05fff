from __future__ import annotations

import json
import logging
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomli_w

from . import _json

if TYPE_CHECKING:
    from ._graph import Graph

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".toml")


def _serialize_value(value: Any, where: str = "document") -> Any:
    """Recursively prepare a document value for TOML export.

    Handles:
    - dict: Recursively serializes values, excluding None (TOML doesn't support None)
    - list/tuple: Recursively serializes items, excluding None
    - Path objects: Converted to strings
    - Primitives and TOML-native types: Returned as-is

    Every dropped None is logged as a warning naming its location.
    """
    if isinstance(value, dict):
        result = {}
        for k, v in value.items():
            if v is None:
                logger.warning(f"Dropping None at {where}.{k}: TOML cannot represent it")
                continue
            result[str(k)] = _serialize_value(v, f"{where}.{k}")
        return result

    if isinstance(value, (list, tuple)):
        items = []
        for i, item in enumerate(value):
            if item is None:
                logger.warning(f"Dropping None at {where}[{i}]: TOML cannot represent it")
                continue
            items.append(_serialize_value(item, f"{where}[{i}]"))
        return items

    if isinstance(value, Path):
        return str(value)

    return value


def _check_suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in SUPPORTED_SUFFIXES:
        msg = f"Unsupported graph file format '{path.suffix}' for {path}. Expected one of: {', '.join(SUPPORTED_SUFFIXES)}"
        raise ValueError(msg)
    return suffix


def load_graph(path: Path) -> Graph:
    """Load a graph from a JSON or TOML file.

    The format is chosen from the file suffix. Both formats hold the same
    document layout, see :mod:`graphkit._json`.

    Args:
        path: Path to a ``.json`` or ``.toml`` file.

    Returns:
        The loaded graph.

    Raises:
        ValueError: If the suffix is not supported.
        pydantic.ValidationError: If the file content is not a graph document.

    """
    path = Path(path)
    suffix = _check_suffix(path)

    with path.open("rb") as f:
        data = tomllib.load(f) if suffix == ".toml" else json.load(f)

    graph = _json.read(data)
    logger.debug(f"Loaded graph from {path}")
    return graph


def save_graph(graph: Graph, path: Path) -> None:
    """Save a graph to a JSON or TOML file, chosen from the file suffix.

    In TOML output, None values nested inside labels are dropped with a
    warning since TOML cannot represent them.

    Raises:
        ValueError: If the suffix is not supported.

    """
    path = Path(path)
    suffix = _check_suffix(path)
    document = _json.write(graph)

    if suffix == ".toml":
        with path.open("wb") as f:
            tomli_w.dump(_serialize_value(document), f)
    else:
        with path.open("w", encoding="utf-8") as f:
            json.dump(document, f, indent=2)
            f.write("\n")

    logger.debug(f"Saved graph to {path}")
