"""Pytest fixtures for graph building and layout tests."""

import pytest


@pytest.fixture
def simple_chain() -> tuple[list[str], list[tuple[str, str]]]:
    """Simple chain: A -> B -> C (ranks 0, 1, 2)."""
    return ["A", "B", "C"], [("A", "B"), ("B", "C")]


@pytest.fixture
def diamond_graph() -> tuple[list[str], list[tuple[str, str]]]:
    """Diamond: A -> B, A -> C, B -> D, C -> D (D at rank 2)."""
    return ["A", "B", "C", "D"], [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]


@pytest.fixture
def multiple_roots() -> tuple[list[str], list[tuple[str, str]]]:
    """Two sources: A and B both feed C, which feeds D."""
    return ["A", "B", "C", "D"], [("A", "C"), ("B", "C"), ("C", "D")]


@pytest.fixture
def back_edge_graph() -> tuple[list[str], list[tuple[str, str]]]:
    """Graph with back edge: A -> B -> C -> A (cycle)."""
    return ["A", "B", "C"], [("A", "B"), ("B", "C"), ("C", "A")]


@pytest.fixture
def forward_skip_graph() -> tuple[list[str], list[tuple[str, str]]]:
    """Graph with forward skip edge: A -> B -> C, A -> C (skip from A to C)."""
    return ["A", "B", "C"], [("A", "B"), ("A", "C"), ("B", "C")]


@pytest.fixture
def complex_graph() -> tuple[list[str], list[tuple[str, str]]]:
    """Complex graph with multiple ranks, a cycle and a disconnected pair."""
    node_ids = [
        "src/a.ts",
        "src/b.ts",
        "src/c.ts",
        "src/d.ts",
        "src/e.ts",
        "src/f.ts",
        "src/g.ts",
        "lib/x.h",
        "lib/y.h",
    ]
    pairs = [
        ("src/a.ts", "src/b.ts"),
        ("src/a.ts", "src/c.ts"),
        ("src/b.ts", "src/d.ts"),
        ("src/b.ts", "src/e.ts"),
        ("src/c.ts", "src/e.ts"),
        ("src/c.ts", "src/f.ts"),
        ("src/d.ts", "src/g.ts"),
        ("src/e.ts", "src/g.ts"),
        ("src/f.ts", "src/g.ts"),
        ("src/f.ts", "src/b.ts"),
        ("src/g.ts", "src/c.ts"),  # Closes c -> f -> g -> c
        ("lib/x.h", "lib/y.h"),
    ]
    return node_ids, pairs


@pytest.fixture
def crossing_graph() -> tuple[list[str], list[tuple[str, str]]]:
    """Two sources whose targets are listed in crossing order: A -> D, B -> C."""
    return ["A", "B", "C", "D"], [("A", "D"), ("B", "C")]


@pytest.fixture
def pr_payload() -> dict:
    """GraphQL pull request response with a mix of valid and malformed entries."""
    return {
        "data": {
            "repository": {
                "pullRequests": {
                    "nodes": [
                        {
                            "author": {"login": "alice", "avatarUrl": "https://a/alice.png"},
                            "createdAt": "2024-03-01T10:00:00Z",
                            "reviews": {
                                "nodes": [
                                    {
                                        "author": {"login": "bob", "avatarUrl": "https://a/bob.png"},
                                        "submittedAt": "2024-03-02T09:00:00Z",
                                    },
                                    {
                                        "author": {"login": "bob", "avatarUrl": "https://a/bob.png"},
                                        "submittedAt": "2024-03-03T09:00:00Z",
                                    },
                                    {
                                        "author": {"login": "alice", "avatarUrl": "https://a/alice.png"},
                                        "submittedAt": "2024-03-04T09:00:00Z",
                                    },
                                ]
                            },
                        },
                        {
                            "author": {"login": "bob", "avatarUrl": "https://a/bob.png"},
                            "createdAt": "2024-02-01T10:00:00Z",
                            "reviews": {
                                "nodes": [
                                    {
                                        "author": {"login": "carol", "avatarUrl": None},
                                        "submittedAt": None,
                                    },
                                    {"author": None, "submittedAt": "2024-02-02T10:00:00Z"},
                                ]
                            },
                        },
                        {
                            "author": None,
                            "createdAt": "2024-05-01T10:00:00Z",
                            "reviews": {
                                "nodes": [
                                    {
                                        "author": {"login": "dave", "avatarUrl": None},
                                        "submittedAt": "2024-05-02T10:00:00Z",
                                    }
                                ]
                            },
                        },
                    ]
                }
            }
        }
    }
