"""
skilltree.commands.render - Write the Graphviz digraph for a skill tree.
"""

from __future__ import annotations

import argparse
import sys

from skilltree.commands._common import resolve_tree_path
from skilltree.core.loader import load_tree
from skilltree.errors import SkillTreeError
from skilltree.render import to_graphviz


def run(args: argparse.Namespace) -> int:
    """
    Run the render command.

    The whole digraph is rendered before anything is written, so a failed
    render never leaves a partial output file behind.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    path = resolve_tree_path(args)
    if path is None:
        return 1

    try:
        tree = load_tree(path, validate=not getattr(args, "no_validate", False))
        text = to_graphviz(tree)
    except SkillTreeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    output = getattr(args, "output", None)
    if output is None:
        sys.stdout.write(text)
        return 0

    try:
        output.write_text(text, encoding="utf-8")
    except OSError as e:
        print(f"Error: cannot write {output}: {e}", file=sys.stderr)
        return 1

    if not getattr(args, "quiet", False):
        print(f"Wrote {output}", file=sys.stderr)
    return 0
