"""
Graph Loading and Export.

The data boundary of structview: reads a raw `graph.json` produced by a
scanner and writes the prepared view in the shape the diagram renderer
consumes.

Expected input format:
{
    "nodes": [{"id": "dir:src", "label": "src"}, ...],
    "edges": [{"from": "dir:src", "to": "file:src/a.ts", "type": "child"}, ...]
}
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from .config import LAYOUT_OPTIONS
from .core.types import RawGraph
from .core.view import PreparedView

logger = logging.getLogger(__name__)


class GraphLoadError(Exception):
    """
    Raised when a graph file cannot be read as a graph.

    Attributes:
        path: The file that failed to load.
        message: Human-readable reason.
    """

    def __init__(self, path: Path, message: str):
        self.path = path
        self.message = message
        super().__init__(f"{path}: {message}")


def parse_raw_graph(data: Any, source: Path | None = None) -> RawGraph:
    """
    Validate the outer shape of decoded JSON.

    Only the envelope is checked: an object whose `nodes` and `edges` are
    lists (or absent). Individual records are left to the Normalizer.
    """
    path = source or Path("<memory>")
    if not isinstance(data, dict):
        raise GraphLoadError(path, f"expected a JSON object, got {type(data).__name__}")
    try:
        return RawGraph.model_validate(data)
    except ValidationError as e:
        raise GraphLoadError(path, f"nodes and edges must be lists ({e.error_count()} error(s))") from e


def load_raw_graph(graph_file: str | Path) -> RawGraph:
    """
    Load a raw graph from a JSON file.

    Args:
        graph_file: Path to the JSON file.

    Returns:
        RawGraph: The undecorated nodes and edges.

    Raises:
        GraphLoadError: If the file is missing, is not JSON, or is not
            graph-shaped.
    """
    path = Path(graph_file)
    if not path.is_file():
        raise GraphLoadError(path, "file not found")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise GraphLoadError(path, f"could not read file: {e}") from e
    except json.JSONDecodeError as e:
        raise GraphLoadError(path, f"invalid JSON: {e}") from e

    raw = parse_raw_graph(data, source=path)
    logger.info(f"Loaded {len(raw.nodes)} nodes and {len(raw.edges)} edges from {path}")
    return raw


def view_to_dict(view: PreparedView, details_path: str | None = None) -> Dict[str, Any]:
    """
    Renderer payload for a prepared view.

    details_path is the selected file handed on to the details panel.
    """
    payload = view.snapshot.to_dict()
    return {
        "mode": view.mode.value,
        "title": view.title,
        "focus": view.focus_id,
        "details_path": details_path,
        "nodes": payload["nodes"],
        "edges": payload["edges"],
        "layout": dict(LAYOUT_OPTIONS),
    }


def view_to_json(view: PreparedView, details_path: str | None = None, indent: int | None = 2) -> str:
    return json.dumps(view_to_dict(view, details_path), indent=indent, ensure_ascii=False)


def write_view(view: PreparedView, output_path: str | Path, details_path: str | None = None) -> Path:
    """Write the renderer payload to a file, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(view_to_json(view, details_path) + "\n", encoding="utf-8")
    return path
