"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from textgraph.graph import DirectedGraph, build_graph_from_text

CORPUS = (
    "The scientist carefully analyzed the data, wrote a detailed report, "
    "and shared the report with the team.\n"
    "But the team requested more data, so the scientist quickly analyzed it again.\n"
)


class FirstChoice:
    """Deterministic stand-in for random.Random that always picks the first item."""

    def choice(self, seq: Sequence[str]) -> str:
        return seq[0]


class LastChoice:
    """Deterministic stand-in for random.Random that always picks the last item."""

    def choice(self, seq: Sequence[str]) -> str:
        return seq[-1]


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def corpus_text() -> str:
    """Return the sample corpus text."""
    return CORPUS


@pytest.fixture
def corpus_file(tmp_path: Path) -> Path:
    """Write the sample corpus into tmp_path and return its path."""
    path = tmp_path / "Easy Test.txt"
    path.write_text(CORPUS, encoding="utf-8")
    return path


@pytest.fixture
def corpus_graph() -> DirectedGraph:
    """Return a graph built from the sample corpus."""
    return build_graph_from_text(CORPUS)


@pytest.fixture
def tied_graph() -> DirectedGraph:
    """
    Graph with two equally short paths a -> b -> d and a -> c -> d.

    Edges: a->b, b->d, d->a, a->c, c->d (all weight 1).
    """
    return build_graph_from_text("a b d a c d")


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice()


@pytest.fixture
def last_choice() -> LastChoice:
    return LastChoice()
