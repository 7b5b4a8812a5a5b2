"""Node labels for the Graphviz output.

Goals get a plain quoted label. Groups get an HTML-like table: a header row
exposing the ``all`` port, then one row per item whose cells expose the
item's ``_<port>_in`` and ``_<port>_out`` ports.
"""

from __future__ import annotations

import html as _html
from typing import TYPE_CHECKING

from skilltree.config.defaults import DEFAULT_HEADER_COLOR
from skilltree.core.references import GROUP_PORT
from skilltree.core.styles import resolve_style

if TYPE_CHECKING:
    from skilltree.core.models import Goal, Group, Item, SkillTree, StatusStyle


def escape(text: str) -> str:
    """Escape text for a label; newlines become line breaks."""
    return _html.escape(text, quote=True).replace("\n", "<br/>")


def attribute_str(name: str, value: str | None, suffix: str = "") -> str:
    """`` name="value<suffix>"`` with a leading space, or "" when value is None."""
    if value is None:
        return ""
    return f' {name}="{value}{suffix}"'


def goal_label(goal: Goal) -> str:
    return f'  label = "{escape(goal.display_label)}"'


def group_label(tree: SkillTree, group: Group) -> list[str]:
    """Lines of the table label for a group node.

    Args:
        tree: Tree supplying the style registry and default status.
        group: Group to render.

    Returns:
        Label lines, without trailing newlines.
    """
    lines = ["  label = <<table>", header_row(group)]
    for item in group.items:
        lines.append(item_row(item, resolve_style(tree, group, item)))
    lines.append("  </table>>")
    return lines


def header_row(group: Group) -> str:
    header_color = group.header_color if group.header_color is not None else DEFAULT_HEADER_COLOR
    href = attribute_str("href", escape_attribute(group.href))
    return (
        f'    <tr><td bgcolor="{header_color}" port="{GROUP_PORT}" colspan="2"{href}>'
        f"{escape(group.display_label)}</td></tr>"
    )


def item_row(item: Item, style: StatusStyle) -> str:
    """One table row: the status glyph cell, then the label cell."""
    fontcolor = attribute_str("fontcolor", style.fontcolor)
    bgcolor = attribute_str("bgcolor", style.bgcolor)
    href = attribute_str("href", escape_attribute(item.href))
    port_in = attribute_str("port", item.port_in)
    port_out = attribute_str("port", item.port_out)
    emoji = style.emoji or ""
    return (
        "    "
        "<tr>"
        f"<td{bgcolor}{port_in}>{emoji}</td>"
        f"<td{fontcolor}{bgcolor}{href}{port_out}>"
        f"{style.start_tag}{escape(item.label)}{style.end_tag}"
        "</td>"
        "</tr>"
    )


def escape_attribute(value: str | None) -> str | None:
    """Escape an attribute value, passing None through."""
    return _html.escape(value, quote=True) if value is not None else None
