"""
Text-to-graph builder.

Normalizes raw text into lowercase alphabetic tokens and folds each pair of
consecutive tokens into a DirectedGraph edge.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path

from textgraph.config import get_base_dir
from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)

NON_ALPHA_PATTERN = re.compile(r"[^a-zA-Z\s]")
WHITESPACE_PATTERN = re.compile(r"\s+")


class UnsafePathError(ValueError):
    """Raised when an input path resolves outside the allowed base directory."""


def clean_text(text: str) -> str:
    """
    Replace non-letters with spaces, lowercase, and collapse whitespace.

    Example:
        >>> clean_text("Hello, World!  42x")
        'hello world x'
    """
    text = NON_ALPHA_PATTERN.sub(" ", text).lower()
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def tokenize(text: str) -> list[str]:
    """Split cleaned text into tokens. Empty or non-alphabetic text gives []."""
    return clean_text(text).split()


def build_graph_from_tokens(
    tokens: list[str], graph: DirectedGraph | None = None
) -> DirectedGraph:
    """Add every token as a node and every consecutive pair as an edge."""
    graph = graph if graph is not None else DirectedGraph()

    for token in tokens:
        graph.add_node(token)
    for source, target in zip(tokens, tokens[1:]):
        graph.add_edge(source, target)

    return graph


def build_graph_from_text(
    text: str, graph: DirectedGraph | None = None
) -> DirectedGraph:
    """Build (or extend) a graph from raw text."""
    return build_graph_from_tokens(tokenize(text), graph)


def resolve_input_path(path: str | Path, base_dir: str | Path | None = None) -> Path:
    """
    Resolve path against base_dir, rejecting anything that escapes it.

    Raises:
        UnsafePathError: If the resolved path is outside base_dir
    """
    base = Path(base_dir).resolve() if base_dir is not None else get_base_dir()
    resolved = (base / path).resolve()

    if not resolved.is_relative_to(base):
        raise UnsafePathError(
            f"Access to files outside {base} is not allowed: {path}"
        )
    return resolved


def read_text(path: Path) -> str:
    """
    Read a UTF-8 text file, joining its lines with spaces.

    Raises:
        OSError: If the file cannot be read or is not valid UTF-8
    """
    try:
        with open(path, encoding="utf-8") as f:
            return " ".join(line.rstrip("\r\n") for line in f)
    except UnicodeDecodeError as e:
        raise OSError(f"{path} is not valid UTF-8: {e}") from e


def build_graph_from_file(
    path: str | Path,
    base_dir: str | Path | None = None,
    graph: DirectedGraph | None = None,
) -> DirectedGraph:
    """
    Build (or extend) a graph from a text file.

    The file is fully read and tokenized before the graph is touched, so a
    failed call leaves ``graph`` unchanged.

    Args:
        path: File path, relative to base_dir or absolute inside it
        base_dir: Directory the file must stay inside (default: config base dir)
        graph: Existing graph to extend (default: a new one)

    Raises:
        UnsafePathError: If the path escapes base_dir
        OSError: If the file cannot be read or is not valid UTF-8
    """
    resolved = resolve_input_path(path, base_dir)
    logger.info(f"Reading text from {resolved}...")
    tokens = tokenize(read_text(resolved))

    graph = build_graph_from_tokens(tokens, graph)
    logger.info(
        f"Built graph from {len(tokens):,} tokens: "
        f"{len(graph):,} nodes, {graph.edge_count():,} edges"
    )
    return graph
