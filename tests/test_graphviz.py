"""Tests for Graphviz emission."""

import io

import pytest

from skilltree.core.models import Goal, Group, Item, SkillTree, StatusStyle
from skilltree.errors import EncodingError, InvalidReferenceError, IoError, MissingPortError
from skilltree.render.graphviz import render_path, render_text, to_graphviz, write_graphviz

BASICS_OUTPUT = """\
digraph g {
graph [ rankdir = "LR" ];
node [ fontsize="16", shape = "ellipse" ];
edge [ ];
"basics" [
  label = <<table>
    <tr><td bgcolor="darkgoldenrod" port="all" colspan="2">basics</td></tr>
    <tr><td bgcolor="cornsilk" port="_a_in">\U0001f64b</td><td fontcolor="red" bgcolor="cornsilk" port="_a_out">a</td></tr>
    <tr><td bgcolor="cornsilk" port="_b_in">\U0001f64b</td><td fontcolor="red" bgcolor="cornsilk" port="_b_out">b</td></tr>
  </table>>
  shape = "none"
  margin = 0
]
"basics":_a_out -> "basics":_b_in;
}
"""


def edge_lines(text):
    return [line for line in text.splitlines() if " -> " in line]


class TestScenarios:
    """End-to-end scenarios."""

    def test_item_requires_item(self, basics_tree):
        output = to_graphviz(basics_tree)
        assert edge_lines(output) == ['"basics":_a_out -> "basics":_b_in;']

    def test_full_output(self, basics_tree):
        assert to_graphviz(basics_tree) == BASICS_OUTPUT

    def test_goal_requires_group(self):
        tree = SkillTree(
            groups=[Group(name="basics")],
            goals=[Goal(name="done", requires=["basics"])],
        )
        assert edge_lines(to_graphviz(tree)) == ['"basics":all -> "done";']

    def test_unknown_requirement(self):
        tree = SkillTree(
            groups=[Group(name="basics")],
            goals=[Goal(name="done", requires=["ghost"])],
        )
        with pytest.raises(InvalidReferenceError) as exc_info:
            to_graphviz(tree)
        assert exc_info.value.token == "ghost"


class TestNodes:
    """Tests for node declarations."""

    def test_preamble_and_close(self):
        lines = to_graphviz(SkillTree()).splitlines()
        assert lines == [
            "digraph g {",
            'graph [ rankdir = "LR" ];',
            'node [ fontsize="16", shape = "ellipse" ];',
            "edge [ ];",
            "}",
        ]

    def test_goal_node(self):
        output = to_graphviz(SkillTree(goals=[Goal(name="done", label="Done!")]))
        assert (
            '"done" [\n'
            '  label = "Done!"\n'
            '  shape = "note"\n'
            "  margin = 0\n"
            '  style = "filled"\n'
            '  fillcolor = "darkgoldenrod"\n'
            "]\n"
        ) in output

    def test_goal_href_not_emitted(self):
        goal = Goal(name="done", href="https://x.org/")
        output = to_graphviz(SkillTree(goals=[goal]))
        assert "href" not in output
        assert goal.href == "https://x.org/"

    def test_group_node_shape(self):
        output = to_graphviz(SkillTree(groups=[Group(name="g")]))
        assert '"g" [\n  label = <<table>\n' in output
        assert '  </table>>\n  shape = "none"\n  margin = 0\n]\n' in output

    def test_groups_before_goals_in_order(self):
        tree = SkillTree(
            groups=[Group(name="zeta"), Group(name="alpha")],
            goals=[Goal(name="omega"), Goal(name="beta")],
        )
        output = to_graphviz(tree)
        positions = [output.index(f'"{name}" [') for name in ("zeta", "alpha", "omega", "beta")]
        assert positions == sorted(positions)

    def test_custom_style(self):
        tree = SkillTree(
            status={"Wip": StatusStyle(emoji="W", bgcolor="pink")},
            default_status="Wip",
            groups=[Group(name="g", items=[Item(label="x", port="x")])],
        )
        output = to_graphviz(tree)
        assert '<td bgcolor="pink" port="_x_in">W</td>' in output


class TestEdges:
    """Tests for edge emission order and shape."""

    def test_edge_categories_in_order(self, sample_tree):
        assert edge_lines(to_graphviz(sample_tree)) == [
            '"basics":all -> "advanced":all;',
            '"basics":_book_out -> "basics":_hello_in;',
            '"basics":_hello_out -> "advanced":_traits_in;',
            '"advanced":_lifetimes_out -> "ship";',
            '"basics":all -> "ship";',
        ]

    def test_group_edges_before_item_edges(self):
        tree = SkillTree(
            groups=[
                Group(
                    name="a",
                    items=[Item(label="x", port="x"), Item(label="y", port="y", requires=["a:x"])],
                ),
                Group(name="b", requires=["a"]),
            ]
        )
        assert edge_lines(to_graphviz(tree)) == [
            '"a":all -> "b":all;',
            '"a":_x_out -> "a":_y_in;',
        ]

    def test_no_deduplication(self):
        tree = SkillTree(
            groups=[Group(name="a"), Group(name="b", requires=["a", "a"])],
        )
        assert edge_lines(to_graphviz(tree)) == ['"a":all -> "b":all;', '"a":all -> "b":all;']

    def test_goal_requires_goal(self):
        tree = SkillTree(goals=[Goal(name="first"), Goal(name="second", requires=["first"])])
        assert edge_lines(to_graphviz(tree)) == ['"first" -> "second";']

    def test_missing_port(self):
        tree = SkillTree(
            groups=[
                Group(
                    name="g",
                    items=[Item(label="a", port="a"), Item(label="Portless", requires=["g:a"])],
                )
            ]
        )
        with pytest.raises(MissingPortError) as exc_info:
            to_graphviz(tree)
        assert exc_info.value.label == "Portless"
        assert "Portless" in str(exc_info.value)

    def test_portless_item_without_requirements_renders(self):
        tree = SkillTree(groups=[Group(name="g", items=[Item(label="note")])])
        assert 'bgcolor="cornsilk">note</td></tr>' in to_graphviz(tree)


class TestSinks:
    """Tests for writing to caller-supplied sinks."""

    def test_text_sink(self, basics_tree):
        buffer = io.StringIO()
        write_graphviz(basics_tree, buffer)
        assert buffer.getvalue() == BASICS_OUTPUT

    def test_binary_sink(self, basics_tree):
        buffer = io.BytesIO()
        basics_tree.write_graphviz(buffer)
        assert buffer.getvalue().decode("utf-8") == BASICS_OUTPUT

    def test_method_matches_function(self, basics_tree):
        assert basics_tree.to_graphviz() == to_graphviz(basics_tree)

    def test_deterministic(self, sample_text):
        assert render_text(sample_text) == render_text(sample_text)

    def test_partial_output_left_on_failure(self):
        tree = SkillTree(goals=[Goal(name="done", requires=["ghost"])])
        buffer = io.StringIO()
        with pytest.raises(InvalidReferenceError):
            write_graphviz(tree, buffer)
        assert buffer.getvalue().startswith("digraph g {\n")
        assert not buffer.getvalue().endswith("}\n")

    def test_non_stream_sink_receives_text(self, basics_tree):
        class Collector:
            def __init__(self):
                self.chunks = []

            def write(self, chunk):
                self.chunks.append(chunk)

        sink = Collector()
        write_graphviz(basics_tree, sink)
        assert all(isinstance(chunk, str) for chunk in sink.chunks)
        assert "".join(sink.chunks) == BASICS_OUTPUT

    def test_write_failure(self, basics_tree):
        class BrokenSink(io.StringIO):
            def write(self, s):
                raise OSError("disk full")

        with pytest.raises(IoError, match="disk full"):
            write_graphviz(basics_tree, BrokenSink())

    def test_unencodable_output(self):
        tree = SkillTree(goals=[Goal(name="done", label="bad \ud800 surrogate")])
        with pytest.raises(EncodingError):
            to_graphviz(tree)


class TestEntryPoints:
    """Tests for render_text and render_path."""

    def test_render_text(self, sample_text, sample_tree):
        assert render_text(sample_text) == to_graphviz(sample_tree)

    def test_render_path(self, tree_file, sample_text):
        assert render_path(tree_file) == render_text(sample_text)

    def test_render_missing_path(self, tmp_path):
        with pytest.raises(IoError):
            render_path(tmp_path / "missing.toml")
