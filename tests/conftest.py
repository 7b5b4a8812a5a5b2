"""Shared fixtures for skilltree tests."""

import textwrap

import pytest

SAMPLE_TREE = textwrap.dedent(
    """\
    [[group]]
    name = "basics"
    label = "The Basics"
    href = "https://example.com/basics"
    items = [
        { label = "Read the book", port = "book", status = "Complete" },
        { label = "Write hello world", port = "hello", requires = ["basics:book"] },
        { label = "Ask questions", href = "https://example.com/ask" },
    ]

    [[group]]
    name = "advanced"
    requires = ["basics"]
    status = "Blocked"
    items = [
        { label = "Traits", port = "traits", requires = ["basics:hello"] },
        { label = "Lifetimes", port = "lifetimes", status = "Assigned" },
    ]

    [[goal]]
    name = "ship"
    label = "Ship it"
    requires = ["advanced:lifetimes", "basics"]
    """
)


@pytest.fixture
def sample_text():
    """TOML source for a small two-group tree with one goal."""
    return SAMPLE_TREE


@pytest.fixture
def sample_tree():
    """Parsed and validated sample tree."""
    from skilltree.core.loader import parse_tree

    return parse_tree(SAMPLE_TREE)


@pytest.fixture
def tree_file(tmp_path):
    """Sample tree written to disk."""
    path = tmp_path / "tree.toml"
    path.write_text(SAMPLE_TREE, encoding="utf-8")
    return path


@pytest.fixture
def basics_tree():
    """One group, item b requires item a."""
    from skilltree.core.models import Group, Item, SkillTree

    return SkillTree(
        groups=[
            Group(
                name="basics",
                items=[
                    Item(label="a", port="a"),
                    Item(label="b", port="b", requires=["basics:a"]),
                ],
            )
        ]
    )
