"""
skilltree.core.styles - Status styles and the status cascade.

An item's status comes from the first of: the item, its group, the tree's
default_status. The name is then looked up in the tree's style registry.
Unknown names give the inert StatusStyle() so rendering never stops on a
style problem.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

from skilltree.config.defaults import DEFAULT_DOCUMENT
from skilltree.core.models import StatusStyle

if TYPE_CHECKING:
    from skilltree.core.models import Group, Item, SkillTree

INERT_STYLE = StatusStyle()

UNDERLINE_TAGS = ("<u>", "</u>")

STYLE_FIELDS = ("emoji", "bgcolor", "fontcolor", "start_tag", "end_tag")


def style_from_dict(data: Mapping[str, Any]) -> StatusStyle:
    """Build a StatusStyle from a status table entry."""
    return StatusStyle(
        emoji=data.get("emoji"),
        bgcolor=data.get("bgcolor"),
        fontcolor=data.get("fontcolor"),
        start_tag=data.get("start_tag", ""),
        end_tag=data.get("end_tag", ""),
    )


BUILTIN_STATUS_STYLES: Mapping[str, StatusStyle] = MappingProxyType(
    {name: style_from_dict(entry) for name, entry in DEFAULT_DOCUMENT["status"].items()}
)


def first_present(*values: Optional[str]) -> Optional[str]:
    """Return the first value that is not None."""
    for value in values:
        if value is not None:
            return value
    return None


def resolve_status_name(
    tree: SkillTree, group: Group | None = None, item: Item | None = None
) -> str | None:
    """Status name for an item (or a group, or the tree) after the cascade."""
    return first_present(
        item.status if item is not None else None,
        group.status if group is not None else None,
        tree.default_status,
    )


def resolve_style(
    tree: SkillTree, group: Group | None = None, item: Item | None = None
) -> StatusStyle:
    """
    Resolve the final style for an item, a group, or the tree itself.

    Linked items whose style has no decoration are underlined so the link
    stands out.

    Args:
        tree: Tree holding the style registry and default status
        group: Owning group, if any
        item: Item being styled, if any

    Returns:
        The StatusStyle to render with
    """
    name = resolve_status_name(tree, group, item)
    style = tree.status.get(name, INERT_STYLE) if name is not None else INERT_STYLE
    if item is not None and item.href is not None and not style.has_decoration:
        style = style.with_tags(*UNDERLINE_TAGS)
    return style
