"""
skilltree.core - Data model, references, styles and validation
"""

from skilltree.core.loader import load_tree, parse_tree, tree_from_dict
from skilltree.core.models import Goal, Group, Item, SkillTree, StatusStyle
from skilltree.core.references import PlainReference, PortedReference, parse_reference
from skilltree.core.styles import BUILTIN_STATUS_STYLES, resolve_style
from skilltree.core.validation import validate_tree

__all__ = [
    "SkillTree",
    "Group",
    "Item",
    "Goal",
    "StatusStyle",
    "PlainReference",
    "PortedReference",
    "parse_reference",
    "BUILTIN_STATUS_STYLES",
    "resolve_style",
    "validate_tree",
    "load_tree",
    "parse_tree",
    "tree_from_dict",
]
