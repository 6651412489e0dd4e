"""Tests for code-mode graph building."""

from depflow.graph import (
    CodeGraphBuilder,
    build_code_graph,
    build_reverse_edges,
    compute_in_degrees,
    node_label,
)
from depflow.models import GraphEdge, SourceRecord


def ids(graph) -> list[str]:
    return [node.id for node in graph.nodes]


class TestBuildCodeGraph:
    """Tests for build_code_graph function."""

    def test_single_file_no_deps(self):
        """A file without imports is a lone node."""
        graph = build_code_graph([SourceRecord("solo.ts", "")])
        assert ids(graph) == ["solo.ts"]
        assert graph.edges == ()

    def test_one_import(self):
        """main.ts importing ./utils gives two nodes and one edge."""
        graph = build_code_graph([SourceRecord("main.ts", "import './utils';")])

        assert "main.ts" in ids(graph)
        assert "./utils" in ids(graph)
        assert list(graph.edges) == [
            GraphEdge(id="main.ts->./utils", source="main.ts", target="./utils")
        ]

    def test_multiple_dependencies(self):
        """Every import of a file becomes an edge."""
        graph = build_code_graph(
            [SourceRecord("utils/helper.js", "import './math';\nimport './logger';")]
        )
        assert set(ids(graph)) == {"utils/helper.js", "./math", "./logger"}
        assert len(graph.edges) == 2

    def test_circular_dependencies(self):
        """a.ts <-> b.ts keeps both edges."""
        graph = build_code_graph(
            [SourceRecord("a.ts", "import './b';"), SourceRecord("b.ts", "import './a';")]
        )
        assert GraphEdge("a.ts->./b", "a.ts", "./b") in graph.edges
        assert GraphEdge("b.ts->./a", "b.ts", "./a") in graph.edges

    def test_commented_imports_ignored(self):
        """Commented-out imports create neither nodes nor edges."""
        graph = build_code_graph(
            [SourceRecord("comments.js", "// import './not-used';\nimport './actual';")]
        )
        assert "./not-used" not in ids(graph)
        assert list(graph.edges) == [GraphEdge("comments.js->./actual", "comments.js", "./actual")]

    def test_bare_specifiers_kept_by_default(self):
        """Package imports become nodes unless local_only is requested."""
        files = [
            SourceRecord(
                "feature.ts",
                "import { something } from '../shared';\nimport externalLib from 'external-lib';",
            )
        ]
        graph = build_code_graph(files)
        assert ids(graph) == ["feature.ts", "../shared", "external-lib"]
        assert len(graph.edges) == 2

    def test_local_only_skips_packages(self):
        """local_only keeps relative and path-like targets only."""
        files = [
            SourceRecord(
                "feature.ts",
                "import { something } from '../shared';\n"
                "import externalLib from 'external-lib';\n"
                "import x from 'src/lib/x';",
            )
        ]
        graph = build_code_graph(files, local_only=True)
        assert "external-lib" not in ids(graph)
        assert [e.target for e in graph.edges] == ["../shared", "src/lib/x"]

    def test_duplicate_edges_kept(self):
        """Importing the same target twice yields two edges with the same id."""
        graph = build_code_graph([SourceRecord("a.ts", "import './b';\nimport './b';")])
        assert [e.id for e in graph.edges] == ["a.ts->./b", "a.ts->./b"]
        assert ids(graph) == ["a.ts", "./b"]

    def test_nodes_unique_first_seen_order(self):
        """A target that is also a scanned file appears once, where first seen."""
        graph = build_code_graph(
            [
                SourceRecord("a.h", '#include "b.h"\n#include "c.h"'),
                SourceRecord("b.h", '#include "c.h"'),
            ]
        )
        assert ids(graph) == ["a.h", "b.h", "c.h"]

    def test_node_set_is_union_of_paths_and_targets(self):
        """Nodes are exactly the scanned paths plus the kept targets."""
        files = [
            SourceRecord("src/a.ts", "import b from './b';\nconst c = require('c');"),
            SourceRecord("src/b.ts", "#include <vector>"),
            SourceRecord("src/d.css", ""),
        ]
        graph = build_code_graph(files)
        assert set(ids(graph)) == {"src/a.ts", "src/b.ts", "src/d.css", "./b", "c", "vector"}

    def test_edges_reference_nodes(self):
        """Every edge endpoint is a node of the graph."""
        files = [
            SourceRecord("x.ts", "import './y';\nimport('./z');"),
            SourceRecord("y.ts", "require('../w');"),
        ]
        graph = build_code_graph(files)
        node_ids = set(ids(graph))
        for edge in graph.edges:
            assert edge.source in node_ids
            assert edge.target in node_ids

    def test_rebuild_is_reproducible(self):
        """Building twice from the same input gives equal graphs."""
        files = [
            SourceRecord("a.ts", "import './b';\nimport './c';"),
            SourceRecord("b.ts", "import './a';"),
        ]
        assert build_code_graph(files) == build_code_graph(files)

    def test_labels_are_last_segment(self):
        """Node labels are the file name part of the id."""
        graph = build_code_graph([SourceRecord("src/app/main.ts", "import '../lib/util';")])
        labels = {node.id: node.label for node in graph.nodes}
        assert labels == {"src/app/main.ts": "main.ts", "../lib/util": "util"}


class TestCodeGraphBuilder:
    """Tests for CodeGraphBuilder."""

    def test_add_file_returns_edge_count(self):
        """add_file reports how many edges it added."""
        builder = CodeGraphBuilder(local_only=True)
        assert builder.add_file("a.ts", "import './b';\nimport 'react';") == 1

    def test_build_is_snapshot(self):
        """Adding files after build() does not change an earlier snapshot."""
        builder = CodeGraphBuilder()
        builder.add_file("a.ts", "import './b';")
        first = builder.build()
        builder.add_file("c.ts", "import './d';")

        assert len(first.nodes) == 2
        assert len(first.edges) == 1
        assert len(builder.build().nodes) == 4


class TestNodeLabel:
    """Tests for node_label function."""

    def test_trailing_slash_falls_back_to_id(self):
        """An empty last segment falls back to the whole id."""
        assert node_label("dir/") == "dir/"
        assert node_label("plain") == "plain"


class TestReverseEdges:
    """Tests for build_reverse_edges and compute_in_degrees."""

    def test_multiple_importers(self):
        """A target imported by two files has both as parents."""
        graph = build_code_graph(
            [
                SourceRecord("a.ts", "import './c';"),
                SourceRecord("b.ts", "import './c';\nimport './c';"),
            ]
        )
        assert build_reverse_edges(graph) == {"./c": {"a.ts", "b.ts"}}
        assert compute_in_degrees(graph) == {"a.ts": 0, "./c": 2, "b.ts": 0}
