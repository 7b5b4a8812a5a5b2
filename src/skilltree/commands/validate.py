"""
skilltree.commands.validate - Check a skill tree without rendering it.
"""

from __future__ import annotations

import argparse
import json
import sys

from skilltree.commands._common import resolve_tree_path
from skilltree.core.loader import load_tree
from skilltree.errors import SkillTreeError


def run(args: argparse.Namespace) -> int:
    """
    Run the validate command.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, 1 for validation errors)
    """
    path = resolve_tree_path(args)
    if path is None:
        return 1

    as_json = getattr(args, "json", False)
    quiet = getattr(args, "quiet", False)

    if not quiet and not as_json:
        print(f"Validating skill tree: {path}")

    try:
        tree = load_tree(path)
    except SkillTreeError as e:
        if as_json:
            print(json.dumps({"valid": False, "error": str(e), "kind": type(e).__name__}))
        else:
            print(f"Error: {e}", file=sys.stderr)
        return 1

    summary = tree.summary()
    if as_json:
        print(json.dumps({"valid": True, **summary}, indent=2))
    elif not quiet:
        print(
            f"✓ {summary['groups']} groups, {summary['items']} items, "
            f"{summary['goals']} goals"
        )
    return 0
