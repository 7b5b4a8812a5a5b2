"""
Skill tree loading utilities.

Turns a parsed document (plain dicts and lists, as produced by
skilltree.config) into a SkillTree, checking the document's shape on the way.
These are the entry points used by the CLI and by library callers.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Mapping

from skilltree.config.defaults import DEFAULT_DOCUMENT
from skilltree.config.loader import load_document, merge_documents, parse_toml
from skilltree.core.models import Goal, Group, Item, SkillTree, StatusStyle
from skilltree.core.styles import STYLE_FIELDS, style_from_dict
from skilltree.errors import ParseError

logger = logging.getLogger(__name__)

TREE_KEYS = ("status", "default_status", "group", "goal")
GROUP_KEYS = ("name", "label", "requires", "items", "width", "status", "href", "header_color")
ITEM_KEYS = ("label", "href", "port", "requires", "status")
GOAL_KEYS = ("name", "label", "requires", "href")


def tree_from_dict(document: Mapping[str, Any], validate: bool = True) -> SkillTree:
    """
    Build a SkillTree from a parsed document.

    The document is merged over the built-in status table and default status
    first, so callers only need to supply what they change.

    Args:
        document: Parsed document
        validate: Run structural validation on the result

    Returns:
        The tree

    Raises:
        ParseError: If the document does not have the expected shape
    """
    if not isinstance(document, Mapping):
        raise ParseError(f"expected a table, got {type(document).__name__}")
    _warn_unknown_keys(document, TREE_KEYS, None)
    status_table = document.get("status", {})
    if not isinstance(status_table, Mapping):
        raise ParseError("expected a table", location="status")
    data = merge_documents(DEFAULT_DOCUMENT, dict(document))

    tree = SkillTree(
        status=_parse_status_table(data["status"]),
        default_status=_optional(data, "default_status", str, "default_status"),
        groups=tuple(
            _parse_group(entry, f"group[{i}]")
            for i, entry in enumerate(_array(data, "group", "group"))
        ),
        goals=tuple(
            _parse_goal(entry, f"goal[{i}]")
            for i, entry in enumerate(_array(data, "goal", "goal"))
        ),
    )
    logger.debug(
        "Built tree with %d groups, %d goals, %d statuses",
        len(tree.groups),
        len(tree.goals),
        len(tree.status),
    )
    if validate:
        tree.validate()
    return tree


def parse_tree(text: str, validate: bool = True) -> SkillTree:
    """Parse a TOML skill tree description held in memory."""
    return tree_from_dict(parse_toml(text), validate=validate)


def load_tree(path: Path, validate: bool = True) -> SkillTree:
    """Load a TOML skill tree description from a file."""
    document = load_document(Path(path))
    try:
        return tree_from_dict(document, validate=validate)
    except ParseError as e:
        raise ParseError(str(e), location=str(path)) from e


def _parse_status_table(table: Mapping[str, Any]) -> dict[str, StatusStyle]:
    styles = {}
    for name, entry in table.items():
        location = f"status.{name}"
        if not isinstance(entry, Mapping):
            raise ParseError("expected a table", location=location)
        _warn_unknown_keys(entry, STYLE_FIELDS, location)
        for key in STYLE_FIELDS:
            _optional(entry, key, str, f"{location}.{key}")
        styles[name] = style_from_dict(entry)
    return styles


def _parse_group(data: Any, location: str) -> Group:
    if not isinstance(data, Mapping):
        raise ParseError("expected a table", location=location)
    _warn_unknown_keys(data, GROUP_KEYS, location)
    width = _optional(data, "width", (int, float), f"{location}.width")
    return Group(
        name=_required(data, "name", str, location),
        label=_optional(data, "label", str, f"{location}.label"),
        requires=_string_list(data, "requires", location),
        items=tuple(
            _parse_item(entry, f"{location}.items[{i}]")
            for i, entry in enumerate(_array(data, "items", f"{location}.items"))
        ),
        width=float(width) if width is not None else None,
        status=_optional(data, "status", str, f"{location}.status"),
        href=_optional(data, "href", str, f"{location}.href"),
        header_color=_optional(data, "header_color", str, f"{location}.header_color"),
    )


def _parse_item(data: Any, location: str) -> Item:
    if not isinstance(data, Mapping):
        raise ParseError("expected a table", location=location)
    _warn_unknown_keys(data, ITEM_KEYS, location)
    return Item(
        label=_required(data, "label", str, location),
        href=_optional(data, "href", str, f"{location}.href"),
        port=_optional(data, "port", str, f"{location}.port"),
        requires=_string_list(data, "requires", location),
        status=_optional(data, "status", str, f"{location}.status"),
    )


def _parse_goal(data: Any, location: str) -> Goal:
    if not isinstance(data, Mapping):
        raise ParseError("expected a table", location=location)
    _warn_unknown_keys(data, GOAL_KEYS, location)
    return Goal(
        name=_required(data, "name", str, location),
        label=_optional(data, "label", str, f"{location}.label"),
        requires=_string_list(data, "requires", location),
        href=_optional(data, "href", str, f"{location}.href"),
    )


def _warn_unknown_keys(
    data: Mapping[str, Any], known: tuple[str, ...], location: str | None
) -> None:
    """Unknown keys are ignored; log them so typos are still visible."""
    for key in data:
        if key not in known:
            where = f"{location}.{key}" if location else key
            logger.warning("Ignoring unknown key %s", where)


def _required(data: Mapping[str, Any], key: str, kind: type, location: str) -> Any:
    if key not in data:
        raise ParseError(f"missing required key {key!r}", location=location)
    return _optional(data, key, kind, f"{location}.{key}")


def _optional(data: Mapping[str, Any], key: str, kind: Any, location: str) -> Any:
    value = data.get(key)
    # bool is an int subclass; TOML booleans are never valid here
    if value is not None and (isinstance(value, bool) or not isinstance(value, kind)):
        raise ParseError(f"unexpected {type(value).__name__} value", location=location)
    return value


def _array(data: Mapping[str, Any], key: str, location: str) -> list[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise ParseError("expected an array", location=location)
    return value


def _string_list(data: Mapping[str, Any], key: str, location: str) -> tuple[str, ...]:
    values = _array(data, key, f"{location}.{key}")
    for i, value in enumerate(values):
        if not isinstance(value, str):
            raise ParseError("expected a string", location=f"{location}.{key}[{i}]")
    return tuple(values)
