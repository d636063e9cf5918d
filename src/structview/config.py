"""
Global Configuration and Layout Defaults.

This module centralizes the constants shared by the graph preparation core:
the id-prefix convention of the raw graph, the containment edge type, the
fan-out threshold used when wrapping wide layers, and the size hints handed
to the layout engine.
"""

from typing import Dict

# --- Data Boundary Conventions ---
# Raw node ids encode their kind in a prefix. These are only inspected when
# a raw record is translated into a NodeKind.
DIR_PREFIX = "dir:"
FILE_PREFIX = "file:"
GROUP_NODE_PREFIX = "group:"

# Edge type marking a parent -> child (directory contains entry) relation
CONTAINMENT_EDGE_TYPE = "child"

# --- Wide-Layer Wrapping ---
# Smaller = more stagger columns
MAX_CHILDREN_PER_GROUP = 8

# --- Size Hints ---
CHAR_WIDTH = 7
MIN_NODE_WIDTH = 140
MAX_NODE_WIDTH = 260
DIR_NODE_HEIGHT = 38
FILE_NODE_HEIGHT = 46

# Tiny, unobtrusive router node
ROUTER_NODE_WIDTH = 28
ROUTER_NODE_HEIGHT = 22
ROUTER_TEXT = "…"

DIR_MARKER = "📁 "

# --- Layout Engine Hints ---
# Passed through untouched to the layered layout collaborator.
LAYOUT_OPTIONS: Dict[str, str] = {
    "elk.algorithm": "layered",
    "elk.direction": "RIGHT",
    "elk.edgeRouting": "SPLINES",
    "elk.spacing.nodeNode": "28",
    "elk.layered.spacing.nodeNodeBetweenLayers": "96",
    "elk.layered.considerModelOrder": "true",
}

DEFAULT_GRAPH_FILE = "graph.json"
