"""
skilltree.core.validation - Structural checks on a skill tree.

Checks, stopping at the first failure:
- group and goal names are valid node identifiers and unique across both
- item ports are valid port identifiers and unique within their group
- every item with requirements declares a port
- every requirement token names an existing group, goal or port

Unknown status names are only logged: they fall back to the inert style.
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Iterator

from skilltree.errors import MissingPortError, ValidationError

if TYPE_CHECKING:
    from skilltree.core.models import SkillTree

logger = logging.getLogger(__name__)

NAME_PATTERN = re.compile(r"^[A-Za-z0-9_][A-Za-z0-9_.-]*$")

# Ports appear unquoted after the node id in edge statements
PORT_PATTERN = re.compile(r"^[A-Za-z0-9_]+$")


def is_valid_name(name: str) -> bool:
    return bool(NAME_PATTERN.match(name))


def is_valid_port(port: str) -> bool:
    return bool(PORT_PATTERN.match(port))


def validate_tree(tree: SkillTree) -> None:
    """
    Validate a tree, raising on the first problem.

    Raises:
        ValidationError: Invalid or duplicate names or ports
        MissingPortError: An item has requirements but no port
        InvalidReferenceError: A requirement token names nothing
    """
    _check_names(tree)
    _check_ports(tree)
    for token in _iter_requirement_tokens(tree):
        tree.resolve(token)
    _check_statuses(tree)
    logger.debug(
        "Validated %d groups and %d goals", len(tree.groups), len(tree.goals)
    )


def _check_names(tree: SkillTree) -> None:
    seen: dict[str, str] = {}
    entities = [("group", group.name) for group in tree.groups]
    entities += [("goal", goal.name) for goal in tree.goals]
    for kind, name in entities:
        if not is_valid_name(name):
            raise ValidationError(f"{kind} name {name!r} is not a valid identifier")
        if name in seen:
            raise ValidationError(f"duplicate name {name!r} ({seen[name]} and {kind})")
        seen[name] = kind


def _check_ports(tree: SkillTree) -> None:
    for group in tree.groups:
        ports: set[str] = set()
        for item in group.items:
            if item.port is None:
                if item.requires:
                    raise MissingPortError(item.label)
                continue
            if not is_valid_port(item.port):
                raise ValidationError(
                    f"port {item.port!r} in group {group.name!r} is not a valid identifier"
                )
            if item.port in ports:
                raise ValidationError(f"duplicate port {item.port!r} in group {group.name!r}")
            ports.add(item.port)


def _check_statuses(tree: SkillTree) -> None:
    names = [tree.default_status] + [group.status for group in tree.groups]
    names += [item.status for group in tree.groups for item in group.items]
    for name in dict.fromkeys(names):
        if name is not None and name not in tree.status:
            logger.warning("Unknown status %r; rendering without a style", name)


def _iter_requirement_tokens(tree: SkillTree) -> Iterator[str]:
    for group in tree.groups:
        yield from group.requires
        for item in group.items:
            yield from item.requires
    for goal in tree.goals:
        yield from goal.requires
