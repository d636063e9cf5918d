"""
structview: graph preparation for project structure diagrams.

Turns a raw directory/file graph into focused, layout-friendly node and
edge sets for a layered diagram renderer.
"""

__version__ = "0.3.0"
