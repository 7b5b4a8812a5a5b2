"""
skilltree.config - Document loading and defaults
"""

from skilltree.config.defaults import DEFAULT_DOCUMENT, DEFAULT_STATUS
from skilltree.config.loader import (
    find_tree_file,
    load_document,
    merge_documents,
    parse_document,
    parse_toml,
    parse_toml_document,
)

__all__ = [
    "load_document",
    "parse_document",
    "parse_toml",
    "parse_toml_document",
    "find_tree_file",
    "merge_documents",
    "DEFAULT_DOCUMENT",
    "DEFAULT_STATUS",
]
