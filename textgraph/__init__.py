"""
Text Graph Analysis.

Builds a directed, weighted word-adjacency graph from free text and
answers structural queries over it: bridge words, bridge-word text
generation, shortest paths, PageRank and random walks.
"""

__version__ = "0.1.0"
