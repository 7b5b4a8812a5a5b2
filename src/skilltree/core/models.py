"""
skilltree.core.models - Core data models for skill trees.

Provides frozen dataclasses for the tree, its groups, items and goals, and
the visual style attached to a status. A tree is built once from a parsed
document and is read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from functools import cached_property
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Iterator, Mapping, TextIO, BinaryIO

from skilltree.config.defaults import DEFAULT_STATUS

if TYPE_CHECKING:
    from skilltree.core.references import Reference


def _freeze(obj: object, name: str) -> None:
    """Store a list-valued field as a tuple."""
    value = getattr(obj, name)
    if value is not None and not isinstance(value, tuple):
        object.__setattr__(obj, name, tuple(value))


@dataclass(frozen=True)
class StatusStyle:
    """
    Visual style for one status.

    Attributes:
        emoji: Glyph shown in the left cell of an item row
        bgcolor: Background color of both item cells
        fontcolor: Text color of the item label
        start_tag: Markup opened before the item label (e.g. "<s>")
        end_tag: Markup closed after the item label (e.g. "</s>")
    """

    emoji: str | None = None
    bgcolor: str | None = None
    fontcolor: str | None = None
    start_tag: str = ""
    end_tag: str = ""

    @property
    def has_decoration(self) -> bool:
        return bool(self.start_tag)

    def with_tags(self, start_tag: str, end_tag: str) -> StatusStyle:
        """Return a copy of this style with different decoration tags."""
        return replace(self, start_tag=start_tag, end_tag=end_tag)


@dataclass(frozen=True)
class Item:
    """
    One row of a group.

    Attributes:
        label: Display text
        href: Optional hyperlink
        port: Port identifier; required when the item has requirements
        requires: Requirement tokens gating this item
        status: Status name, overriding the group's status
    """

    label: str
    href: str | None = None
    port: str | None = None
    requires: tuple[str, ...] = ()
    status: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "requires")

    @property
    def port_in(self) -> str | None:
        """Inbound port name inside the group table, if the item has a port."""
        return f"_{self.port}_in" if self.port is not None else None

    @property
    def port_out(self) -> str | None:
        """Outbound port name inside the group table, if the item has a port."""
        return f"_{self.port}_out" if self.port is not None else None


@dataclass(frozen=True)
class Group:
    """
    A named node holding an ordered list of items.

    Attributes:
        name: Unique node identifier
        label: Header text (defaults to name)
        requires: Requirement tokens gating the whole group
        items: Items, in declaration order
        width: Accepted for compatibility with existing documents; not rendered
        status: Status name for items that do not set their own
        href: Hyperlink on the header row
        header_color: Background color of the header row
    """

    name: str
    label: str | None = None
    requires: tuple[str, ...] = ()
    items: tuple[Item, ...] = ()
    width: float | None = None
    status: str | None = None
    href: str | None = None
    header_color: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "requires")
        _freeze(self, "items")

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else self.name

    def iter_items(self) -> Iterator[Item]:
        return iter(self.items)

    def find_item_by_port(self, port: str) -> Item | None:
        for item in self.items:
            if item.port == port:
                return item
        return None


@dataclass(frozen=True)
class Goal:
    """
    A standalone target node. Goals have no ports.

    Attributes:
        name: Unique node identifier (shares the namespace with groups)
        label: Display text (defaults to name)
        requires: Requirement tokens gating this goal
        href: Hyperlink on the goal node
    """

    name: str
    label: str | None = None
    requires: tuple[str, ...] = ()
    href: str | None = None

    def __post_init__(self) -> None:
        _freeze(self, "requires")

    @property
    def display_label(self) -> str:
        return self.label if self.label is not None else self.name


def _builtin_styles() -> Mapping[str, StatusStyle]:
    from skilltree.core.styles import BUILTIN_STATUS_STYLES

    return BUILTIN_STATUS_STYLES


@dataclass(frozen=True)
class SkillTree:
    """
    A complete skill tree.

    Attributes:
        status: Style registry, status name -> StatusStyle
        default_status: Status used when neither item nor group sets one
        groups: Groups, in declaration order
        goals: Goals, in declaration order
    """

    status: Mapping[str, StatusStyle] = field(default_factory=_builtin_styles, hash=False)
    default_status: str | None = DEFAULT_STATUS
    groups: tuple[Group, ...] = ()
    goals: tuple[Goal, ...] = ()

    def __post_init__(self) -> None:
        _freeze(self, "groups")
        _freeze(self, "goals")
        if not isinstance(self.status, MappingProxyType):
            object.__setattr__(self, "status", MappingProxyType(dict(self.status)))

    @cached_property
    def _groups_by_name(self) -> dict[str, Group]:
        return {group.name: group for group in self.groups}

    @cached_property
    def _goals_by_name(self) -> dict[str, Goal]:
        return {goal.name: goal for goal in self.goals}

    def iter_groups(self) -> Iterator[Group]:
        return iter(self.groups)

    def iter_goals(self) -> Iterator[Goal]:
        return iter(self.goals)

    def find_group(self, name: str) -> Group | None:
        return self._groups_by_name.get(name)

    def find_goal(self, name: str) -> Goal | None:
        return self._goals_by_name.get(name)

    def is_goal(self, name: str) -> bool:
        return name in self._goals_by_name

    def is_group(self, name: str) -> bool:
        return name in self._groups_by_name

    def resolve(self, token: str) -> Reference:
        """Parse and check a requirement token against this tree."""
        from skilltree.core.references import resolve_reference

        return resolve_reference(self, token)

    def port_name(self, token: str, direction: str) -> str:
        """Graph anchor for a requirement token ("in" or "out")."""
        from skilltree.core.references import anchor_for

        return anchor_for(self, token, direction)

    def validate(self) -> None:
        """Raise on the first structural problem in this tree."""
        from skilltree.core.validation import validate_tree

        validate_tree(self)

    def write_graphviz(self, output: TextIO | BinaryIO) -> None:
        """Writes graphviz representing this skill tree to the given output."""
        from skilltree.render.graphviz import write_graphviz

        write_graphviz(self, output)

    def to_graphviz(self) -> str:
        """Generates a string containing graphviz content for this skill tree."""
        from skilltree.render.graphviz import to_graphviz

        return to_graphviz(self)

    def summary(self) -> dict[str, Any]:
        """Entity counts, used by the validate command."""
        return {
            "groups": len(self.groups),
            "items": sum(len(group.items) for group in self.groups),
            "goals": len(self.goals),
            "statuses": sorted(self.status),
        }
