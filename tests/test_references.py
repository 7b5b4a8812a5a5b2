"""Tests for requirement token parsing and anchor resolution."""

import pytest

from skilltree.core.models import Goal, Group, Item, SkillTree
from skilltree.core.references import (
    PlainReference,
    PortedReference,
    anchor_for,
    group_anchor,
    parse_reference,
)
from skilltree.errors import InvalidReferenceError


@pytest.fixture
def tree():
    return SkillTree(
        groups=[
            Group(name="basics", items=[Item(label="a", port="a")]),
            Group(name="empty"),
        ],
        goals=[Goal(name="done", requires=["basics"])],
    )


class TestParseReference:
    """Tests for parse_reference."""

    def test_plain_token(self):
        assert parse_reference("basics") == PlainReference("basics")

    def test_ported_token(self):
        assert parse_reference("basics:a") == PortedReference("basics", "a")

    def test_splits_on_first_separator(self):
        ref = parse_reference("basics:a:b")
        assert ref == PortedReference("basics", "a:b")

    def test_str_round_trips_token(self):
        assert str(parse_reference("basics:a")) == "basics:a"
        assert str(parse_reference("basics")) == "basics"

    @pytest.mark.parametrize("token", ["", ":a", "basics:"])
    def test_empty_parts_rejected(self, token):
        with pytest.raises(InvalidReferenceError) as exc_info:
            parse_reference(token)
        assert exc_info.value.token == token


class TestAnchorFor:
    """Tests for anchor resolution in both directions."""

    def test_ported_out(self, tree):
        assert anchor_for(tree, "basics:a", "out") == '"basics":_a_out'

    def test_ported_in(self, tree):
        assert anchor_for(tree, "basics:a", "in") == '"basics":_a_in'

    def test_group_uses_header_port(self, tree):
        assert anchor_for(tree, "basics", "out") == '"basics":all'
        assert anchor_for(tree, "basics", "in") == '"basics":all'

    def test_group_anchor_named_from_group(self):
        assert group_anchor("empty") == '"empty":all'
        assert group_anchor("empty") == group_anchor("empty")

    def test_goal_has_single_anchor(self, tree):
        assert anchor_for(tree, "done", "out") == '"done"'
        assert anchor_for(tree, "done", "in") == '"done"'

    def test_tree_port_name_delegates(self, tree):
        assert tree.port_name("basics:a", "out") == '"basics":_a_out'

    def test_unknown_entity(self, tree):
        with pytest.raises(InvalidReferenceError) as exc_info:
            anchor_for(tree, "ghost", "out")
        assert exc_info.value.token == "ghost"
        assert "ghost" in str(exc_info.value)

    def test_unknown_group_with_port(self, tree):
        with pytest.raises(InvalidReferenceError) as exc_info:
            anchor_for(tree, "ghost:a", "out")
        assert exc_info.value.token == "ghost:a"

    def test_unknown_port(self, tree):
        with pytest.raises(InvalidReferenceError, match="no port 'zzz'"):
            anchor_for(tree, "basics:zzz", "out")

    def test_goal_with_port(self, tree):
        with pytest.raises(InvalidReferenceError, match="goals have no ports"):
            anchor_for(tree, "done:x", "out")

    def test_bad_direction(self, tree):
        with pytest.raises(ValueError):
            anchor_for(tree, "basics", "sideways")
