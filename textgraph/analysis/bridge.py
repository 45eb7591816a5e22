"""
Bridge-word queries and bridge-word text generation.

A bridge word x connects word1 to word2 when both word1 -> x and
x -> word2 are edges of the graph.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from textgraph.graph.builder import tokenize
from textgraph.graph.store import DirectedGraph

logger = logging.getLogger(__name__)


@dataclass
class BridgeWordsResult:
    """
    Outcome of a bridge-word query.

    Attributes:
        word1: First word of the query
        word2: Second word of the query
        bridges: Bridge words in word1's out-edge order
        words_found: False if either word is missing from the graph
    """

    word1: str
    word2: str
    bridges: list[str] = field(default_factory=list)
    words_found: bool = True

    @property
    def message(self) -> str:
        """Human-readable summary of the query result."""
        if not self.words_found:
            return "No word1 or word2 in the graph!"
        if not self.bridges:
            return f"No bridge words from {self.word1} to {self.word2}!"

        verb = "is" if len(self.bridges) == 1 else "are"
        if len(self.bridges) == 1:
            listed = self.bridges[0]
        else:
            listed = ", ".join(self.bridges[:-1]) + " and " + self.bridges[-1]
        return f"The bridge words from {self.word1} to {self.word2} {verb} {listed}."

    def __str__(self) -> str:
        return self.message


def find_bridge_words(graph: DirectedGraph, word1: str, word2: str) -> list[str]:
    """Return every x with edges word1 -> x and x -> word2."""
    return [
        intermediate
        for intermediate in graph.out_edges(word1)
        if graph.weight(intermediate, word2) > 0
    ]


def query_bridge_words(graph: DirectedGraph, word1: str, word2: str) -> BridgeWordsResult:
    """
    Look up bridge words between two words.

    Missing words are checked before any bridge search and reported as a
    single combined condition.
    """
    if word1 not in graph or word2 not in graph:
        logger.warning(f"Bridge query: '{word1}' or '{word2}' not in graph")
        return BridgeWordsResult(word1=word1, word2=word2, words_found=False)

    bridges = find_bridge_words(graph, word1, word2)
    logger.debug(f"Bridge words {word1} -> {word2}: {bridges}")
    return BridgeWordsResult(word1=word1, word2=word2, bridges=bridges)


def generate_text(
    graph: DirectedGraph, input_text: str, rng: random.Random | None = None
) -> str:
    """
    Insert one random bridge word between each adjacent pair that has any.

    The input is normalized like corpus text; the graph is not modified.

    Args:
        graph: Graph to look bridge words up in
        input_text: Raw text to augment
        rng: Random source (default: a fresh SystemRandom)

    Returns:
        The normalized words, space-separated, with bridge words inserted
    """
    rng = rng or random.SystemRandom()
    words = tokenize(input_text)

    output: list[str] = []
    for current, following in zip(words, words[1:]):
        output.append(current)
        bridges = find_bridge_words(graph, current, following)
        if bridges:
            output.append(rng.choice(bridges))
    output.extend(words[-1:])

    return " ".join(output)
