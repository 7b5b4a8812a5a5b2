"""
skilltree.config.loader - Skill tree document loading.

Documents are TOML. Parsing goes through tomlkit so that multi-line arrays,
inline tables and comments all behave the way TOML users expect.
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import tomlkit
from tomlkit.exceptions import TOMLKitError

from skilltree.config.defaults import DEFAULT_DOCUMENT, TREE_FILE_NAME
from skilltree.errors import IoError, ParseError

logger = logging.getLogger(__name__)


def parse_toml_document(text: str) -> tomlkit.TOMLDocument:
    """Parse TOML text into a tomlkit document (format-preserving).

    Raises:
        ParseError: If the text is not valid TOML.
    """
    try:
        return tomlkit.parse(text)
    except TOMLKitError as e:
        raise ParseError(f"invalid TOML: {e}") from e


def parse_toml(text: str) -> dict[str, Any]:
    """Parse TOML text into plain Python containers.

    Args:
        text: TOML source

    Returns:
        Dict with tomlkit wrapper types unwrapped to dict/list/str/etc.
    """
    return parse_toml_document(text).unwrap()


def merge_documents(
    base: dict[str, Any], override: dict[str, Any], depth: int = 1
) -> dict[str, Any]:
    """
    Merge a user document over a base document.

    Tables nested up to ``depth`` levels merge key by key, so a document that
    redefines one status keeps the other built-in ones. Below that depth, and
    for arrays and scalars, the override value replaces the base value whole.

    Args:
        base: Base document (not modified)
        override: Values taking precedence
        depth: How many levels of tables to merge rather than replace

    Returns:
        New merged document
    """
    result = copy.deepcopy(base)
    for key, value in override.items():
        if depth > 0 and isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = merge_documents(result[key], value, depth - 1)
        else:
            result[key] = copy.deepcopy(value)
    return result


def parse_document(text: str) -> dict[str, Any]:
    """Parse TOML text and merge it over the default document."""
    document = parse_toml(text)
    return _with_defaults(document)


def load_document(path: Path) -> dict[str, Any]:
    """
    Read a skill tree file and merge it over the default document.

    Args:
        path: Path to a TOML skill tree description

    Returns:
        Merged document dict

    Raises:
        IoError: If the file cannot be read
        ParseError: If the file is not valid TOML
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise IoError(f"cannot read {path}: {e}", path=path) from e

    logger.debug("Loaded %d bytes from %s", len(text), path)
    try:
        return parse_document(text)
    except ParseError as e:
        raise ParseError(str(e), location=str(path)) from e


def find_tree_file(start: Path | None = None) -> Path | None:
    """
    Find skill-tree.toml by walking up from a directory.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the file, or None if no parent directory contains one
    """
    current = Path(start or Path.cwd()).resolve()
    while True:
        candidate = current / TREE_FILE_NAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def _with_defaults(document: dict[str, Any]) -> dict[str, Any]:
    status = document.get("status")
    if status is not None and not isinstance(status, dict):
        raise ParseError("expected a table", location="status")
    return merge_documents(DEFAULT_DOCUMENT, document)
