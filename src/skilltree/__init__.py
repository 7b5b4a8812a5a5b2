"""
skilltree - Skill tree to Graphviz converter

Describes a skill tree (groups of items, goals, and the requirements between
them) in TOML and emits a Graphviz digraph for `dot` to lay out.
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("skilltree")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"  # Not installed
__license__ = "MIT"

from skilltree.core import (
    Goal,
    Group,
    Item,
    SkillTree,
    StatusStyle,
    load_tree,
    parse_tree,
    tree_from_dict,
)
from skilltree.errors import (
    EncodingError,
    InvalidReferenceError,
    IoError,
    MissingPortError,
    ParseError,
    SkillTreeError,
    ValidationError,
)
from skilltree.render import render_path, render_text, to_graphviz, write_graphviz

__all__ = [
    "__version__",
    "SkillTree",
    "Group",
    "Item",
    "Goal",
    "StatusStyle",
    "load_tree",
    "parse_tree",
    "tree_from_dict",
    "write_graphviz",
    "to_graphviz",
    "render_text",
    "render_path",
    "SkillTreeError",
    "IoError",
    "ParseError",
    "ValidationError",
    "InvalidReferenceError",
    "MissingPortError",
    "EncodingError",
]
