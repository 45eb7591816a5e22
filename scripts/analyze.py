#!/usr/bin/env python3
"""
Text Graph Analysis CLI - build a word graph from a text file and query it.

Usage:
    python scripts/analyze.py show
    python scripts/analyze.py --file "file/Easy Test.txt" bridge scientist analyzed
    python scripts/analyze.py generate "The scientist analyzed the report"
    python scripts/analyze.py path the report
    python scripts/analyze.py path scientist
    python scripts/analyze.py pagerank the
    python scripts/analyze.py walk
    python scripts/analyze.py snapshot

Commands:
    show      - Print the edge list and write it to file/graph.txt
    bridge    - Bridge words between two words
    generate  - Insert bridge words into new text
    path      - Shortest path(s) between two words, or from one word to all
    pagerank  - PageRank of a word
    walk      - Random walk, also written to file/random_walk.txt
    snapshot  - Save the built graph as msgpack (file/graph.msgpack)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from textgraph.analyzer import TextGraphAnalysis  # noqa: E402
from textgraph.config import DEFAULT_INPUT_PATH, LOG_LEVEL, SNAPSHOT_PATH  # noqa: E402
from textgraph.graph import UnsafePathError  # noqa: E402


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Analyze the word graph of a text file",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    parser.add_argument(
        "--file",
        type=str,
        default=str(DEFAULT_INPUT_PATH),
        help=f"Input text file (default: {DEFAULT_INPUT_PATH})",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging",
    )

    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("show", help="Print and export the edge list")

    bridge = commands.add_parser("bridge", help="Query bridge words")
    bridge.add_argument("word1")
    bridge.add_argument("word2")

    generate = commands.add_parser("generate", help="Generate text with bridge words")
    generate.add_argument("text")

    path = commands.add_parser("path", help="Shortest path(s)")
    path.add_argument("word1")
    path.add_argument("word2", nargs="?", default=None)

    pagerank = commands.add_parser("pagerank", help="PageRank of a word")
    pagerank.add_argument("word")

    commands.add_parser("walk", help="Random walk")

    snapshot = commands.add_parser("snapshot", help="Save the graph as msgpack")
    snapshot.add_argument(
        "--output",
        type=str,
        default=str(SNAPSHOT_PATH),
        help=f"Snapshot path (default: {SNAPSHOT_PATH})",
    )

    return parser.parse_args(argv)


def run_command(analysis: TextGraphAnalysis, args: argparse.Namespace) -> None:
    """Run one query and print its result."""
    if args.command == "show":
        for line in analysis.export_graph().splitlines():
            source, target, weight = line.split(" ")
            print(f"{source} -> {target} (weight: {weight})")
    elif args.command == "bridge":
        print(analysis.bridge_words(args.word1, args.word2))
    elif args.command == "generate":
        print(analysis.generate_text(args.text))
    elif args.command == "path":
        print(analysis.shortest_path(args.word1, args.word2))
    elif args.command == "pagerank":
        print(f"PageRank: {analysis.page_rank(args.word)}")
    elif args.command == "walk":
        print(f"Random walk: {analysis.random_walk()}")
    elif args.command == "snapshot":
        analysis.save_snapshot(args.output)
        print(f"Saved snapshot to {args.output}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Set up logging
    log_level = logging.DEBUG if args.verbose else LOG_LEVEL
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    analysis = TextGraphAnalysis()
    try:
        analysis.build_graph(args.file)
    except UnsafePathError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Error reading {args.file}: {e}", file=sys.stderr)
        return 1

    try:
        run_command(analysis, args)
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
