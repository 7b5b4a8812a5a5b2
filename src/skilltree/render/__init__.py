"""Render module - Graphviz output for skill trees.

Exports:
- write_graphviz: Render to a caller-supplied sink
- to_graphviz: Render to a string
- render_text / render_path: Parse or load, then render
- escape: Label text escaping
"""

from skilltree.render.graphviz import render_path, render_text, to_graphviz, write_graphviz
from skilltree.render.labels import escape

__all__ = [
    "write_graphviz",
    "to_graphviz",
    "render_text",
    "render_path",
    "escape",
]
