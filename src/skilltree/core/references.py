"""Requirement references - parsing tokens and resolving graph anchors.

A requirement token names the source of a dependency edge:
- ``name``: a whole group (its header row) or a goal
- ``name:port``: one item of a group, addressed by its port

Tokens are parsed once into a PlainReference or PortedReference, then turned
into a Graphviz anchor for the requested direction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Union

from skilltree.errors import InvalidReferenceError

if TYPE_CHECKING:
    from skilltree.core.models import SkillTree

PORT_SEPARATOR = ":"

# Port of the header row of every group table
GROUP_PORT = "all"

DIRECTIONS = ("in", "out")


@dataclass(frozen=True)
class PlainReference:
    """A reference to a whole group or goal."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PortedReference:
    """A reference to one item of a group."""

    name: str
    port: str

    def __str__(self) -> str:
        return f"{self.name}{PORT_SEPARATOR}{self.port}"


Reference = Union[PlainReference, PortedReference]


def parse_reference(token: str) -> Reference:
    """Parse a requirement token.

    Args:
        token: ``identifier`` or ``identifier:port``.

    Returns:
        The tagged reference.

    Raises:
        InvalidReferenceError: If the name or the port is empty.
    """
    name, sep, port = token.partition(PORT_SEPARATOR)
    if not name:
        raise InvalidReferenceError(token, "empty name")
    if not sep:
        return PlainReference(name)
    if not port:
        raise InvalidReferenceError(token, "empty port")
    return PortedReference(name, port)


def resolve_reference(tree: SkillTree, token: str) -> Reference:
    """Parse a token and check that it names something in the tree.

    Raises:
        InvalidReferenceError: If the named entity does not exist, if a port
            is given for a goal, or if the group declares no such port.
    """
    ref = parse_reference(token)
    if isinstance(ref, PortedReference):
        group = tree.find_group(ref.name)
        if group is None:
            if tree.is_goal(ref.name):
                raise InvalidReferenceError(token, "goals have no ports")
            raise InvalidReferenceError(token, "no such group")
        if group.find_item_by_port(ref.port) is None:
            raise InvalidReferenceError(token, f"group {ref.name!r} has no port {ref.port!r}")
    elif not (tree.is_group(ref.name) or tree.is_goal(ref.name)):
        raise InvalidReferenceError(token, "no such group or goal")
    return ref


def reference_anchor(tree: SkillTree, ref: Reference, direction: str) -> str:
    """Graphviz anchor for an already-resolved reference."""
    if direction not in DIRECTIONS:
        raise ValueError(f"direction must be 'in' or 'out', not {direction!r}")
    if isinstance(ref, PortedReference):
        return f'"{ref.name}":_{ref.port}_{direction}'
    if tree.is_goal(ref.name):
        # Goals don't have ports, so there is no `:all`
        return f'"{ref.name}"'
    return group_anchor(ref.name)


def anchor_for(tree: SkillTree, token: str, direction: str) -> str:
    """Resolve a requirement token to a Graphviz anchor.

    Args:
        tree: Tree the token refers into.
        token: ``identifier`` or ``identifier:port``.
        direction: "out" when the token is the edge source, "in" when it is
            the edge target.

    Returns:
        Anchor such as ``"basics":_a_out``, ``"basics":all`` or ``"done"``.
    """
    return reference_anchor(tree, resolve_reference(tree, token), direction)


def group_anchor(name: str) -> str:
    """Anchor of a group's header row."""
    return f'"{name}":{GROUP_PORT}'
