"""Helpers shared by the CLI commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from skilltree.config import find_tree_file
from skilltree.config.defaults import TREE_FILE_NAME


def resolve_tree_path(args: argparse.Namespace) -> Path | None:
    """Tree file from the command line, else the nearest skill-tree.toml."""
    tree = getattr(args, "tree", None)
    if tree is not None:
        return Path(tree)
    found = find_tree_file()
    if found is None:
        print(
            f"Error: no tree file given and no {TREE_FILE_NAME} found "
            "in this directory or its parents",
            file=sys.stderr,
        )
    return found
