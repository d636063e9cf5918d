"""Shared fixtures for structview unit tests."""

import pytest

from structview.core.normalizer import normalize_graph
from structview.core.types import GraphSnapshot


def fan_graph(parent: str, count: int, prefix: str = "file:/src/f") -> GraphSnapshot:
    """A directory with `count` file children, in order."""
    nodes = [{"id": parent, "label": parent.split(":", 1)[1]}]
    edges = []
    for i in range(count):
        file_id = f"{prefix}{i}.ts"
        nodes.append({"id": file_id, "label": file_id.split(":", 1)[1]})
        edges.append({"from": parent, "to": file_id, "type": "child"})
    return normalize_graph({"nodes": nodes, "edges": edges})


@pytest.fixture
def raw_project():
    """
    A small project:

        src/
          a.ts            (imports Button.tsx and docs/guide.md)
          components/
            Button.tsx
        docs/
          guide.md
        README.md         (no parent directory recorded)
    """
    return {
        "nodes": [
            {"id": "dir:/src", "label": "src"},
            {"id": "file:/src/a.ts", "label": "src\\a.ts"},
            {"id": "dir:/src/components", "label": "src/components"},
            {"id": "file:/src/components/Button.tsx", "label": "src/components/Button.tsx"},
            {"id": "dir:/docs", "label": "docs"},
            {"id": "file:/docs/guide.md", "label": "docs/guide.md"},
            {"id": "file:/README.md", "label": "README.md"},
        ],
        "edges": [
            {"from": "dir:/src", "to": "file:/src/a.ts", "type": "child"},
            {"from": "dir:/src", "to": "dir:/src/components", "type": "child"},
            {"from": "dir:/src/components", "to": "file:/src/components/Button.tsx", "type": "child"},
            {"from": "dir:/docs", "to": "file:/docs/guide.md", "type": "child"},
            {"from": "file:/src/a.ts", "to": "file:/src/components/Button.tsx", "type": "imports"},
            {"from": "file:/src/a.ts", "to": "file:/docs/guide.md", "type": "imports"},
        ],
    }


@pytest.fixture
def project(raw_project) -> GraphSnapshot:
    return normalize_graph(raw_project)


@pytest.fixture
def make_fan():
    """Factory fixture for wide single-directory graphs."""
    return fan_graph
