"""Graphviz emission - write a SkillTree as a ``digraph``.

Output order is fixed and mirrors declaration order: group nodes, goal
nodes, then group requirement edges, then item requirement edges, then goal
requirement edges. Nothing is sorted or deduplicated, so the same input
always produces byte-identical output.

Output is written line by line to the sink. When an error is raised the sink
keeps whatever was already written; callers should discard it.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any

from skilltree.config.defaults import GOAL_FILL_COLOR
from skilltree.core.references import group_anchor
from skilltree.errors import EncodingError, IoError, MissingPortError
from skilltree.render.labels import goal_label, group_label

if TYPE_CHECKING:
    from skilltree.core.models import SkillTree

logger = logging.getLogger(__name__)

PREAMBLE = (
    "digraph g {",
    'graph [ rankdir = "LR" ];',
    'node [ fontsize="16", shape = "ellipse" ];',
    "edge [ ];",
)


class _LineWriter:
    """Writes lines to a text or binary sink, mapping failures to our errors."""

    def __init__(self, output: IO[Any]) -> None:
        self.output = output
        self.binary = isinstance(output, (io.RawIOBase, io.BufferedIOBase))
        self.lines = 0

    def writeln(self, line: str) -> None:
        try:
            if self.binary:
                self.output.write(line.encode("utf-8") + b"\n")
            else:
                self.output.write(line + "\n")
        except UnicodeEncodeError as e:
            raise EncodingError(f"cannot encode output: {e}") from e
        except OSError as e:
            raise IoError(f"cannot write output: {e}") from e
        self.lines += 1


def write_graphviz(tree: SkillTree, output: IO[Any]) -> None:
    """
    Write graphviz for a skill tree to a sink.

    Args:
        tree: The tree to render
        output: Writable text or binary stream. Only io.RawIOBase and
            io.BufferedIOBase instances are written bytes; any other sink
            is written str, so a bytes-only object outside those classes
            fails with TypeError from its own write.

    Raises:
        InvalidReferenceError: A requirement token names nothing
        MissingPortError: An item with requirements has no port
        IoError: Writing to the sink failed
        EncodingError: Output could not be encoded
    """
    out = _LineWriter(output)
    for line in PREAMBLE:
        out.writeln(line)

    for group in tree.iter_groups():
        out.writeln(f'"{group.name}" [')
        for line in group_label(tree, group):
            out.writeln(line)
        out.writeln('  shape = "none"')
        out.writeln("  margin = 0")
        out.writeln("]")

    for goal in tree.iter_goals():
        out.writeln(f'"{goal.name}" [')
        out.writeln(goal_label(goal))
        out.writeln('  shape = "note"')
        out.writeln("  margin = 0")
        out.writeln('  style = "filled"')
        out.writeln(f'  fillcolor = "{GOAL_FILL_COLOR}"')
        out.writeln("]")

    edges = 0
    for group in tree.iter_groups():
        for requirement in group.requires:
            out.writeln(f"{tree.port_name(requirement, 'out')} -> {group_anchor(group.name)};")
            edges += 1

    for group in tree.iter_groups():
        for item in group.iter_items():
            for requirement in item.requires:
                if item.port is None:
                    raise MissingPortError(item.label)
                out.writeln(
                    f'{tree.port_name(requirement, "out")} -> "{group.name}":{item.port_in};'
                )
                edges += 1

    for goal in tree.iter_goals():
        for requirement in goal.requires:
            out.writeln(f"{tree.port_name(requirement, 'out')} -> {tree.port_name(goal.name, 'in')};")
            edges += 1

    out.writeln("}")
    logger.debug(
        "Wrote %d groups, %d goals, %d edges (%d lines)",
        len(tree.groups),
        len(tree.goals),
        edges,
        out.lines,
    )


def to_graphviz(tree: SkillTree) -> str:
    """
    Render a skill tree to a string.

    Raises:
        EncodingError: Output could not be materialized as UTF-8 text
    """
    buffer = io.BytesIO()
    write_graphviz(tree, buffer)
    try:
        return buffer.getvalue().decode("utf-8")
    except UnicodeDecodeError as e:
        raise EncodingError(f"output is not valid UTF-8: {e}") from e


def render_text(text: str, validate: bool = True) -> str:
    """Parse a TOML skill tree held in memory and render it."""
    from skilltree.core.loader import parse_tree

    return to_graphviz(parse_tree(text, validate=validate))


def render_path(path: Path, validate: bool = True) -> str:
    """Load a TOML skill tree file and render it."""
    from skilltree.core.loader import load_tree

    return to_graphviz(load_tree(path, validate=validate))
