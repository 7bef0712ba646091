"""
Command-line search over a directory of text documents.

Builds the index in memory, then either answers a single query given on the
command line or reads queries interactively (OR semantics, BM25 ranking).

Usage:
    okapi-search shakespeare "Romeo and Juliet"
    python -m okapi_search.search_cli shakespeare --top 5 --scores
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable

from .errors import EmptyCorpusError, IndexBuildError
from .index_builder import build_index_from_directory
from .query import QueryEngine


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def print_results(engine: QueryEngine, raw_query: str, top_k: int | None, show_scores: bool) -> None:
    ranked = engine.rank(raw_query, top_k=top_k)
    if not ranked:
        print("No documents matched the query.")
        return
    for rank, doc in enumerate(ranked, start=1):
        if show_scores:
            print(f"{rank:2d}. score={doc.score:.4f}  {doc.title}")
        else:
            print(doc.title)


def run_search_loop(engine: QueryEngine, top_k: int | None, show_scores: bool) -> None:
    """
    Interactive command-line search loop.
    """
    print(f"Indexed {engine.index.document_count} documents.")
    print("Enter queries (OR semantics). Empty line or Ctrl+C to exit.")
    while True:
        try:
            raw_query = input("query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if not raw_query:
            break
        print_results(engine, raw_query, top_k, show_scores)


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Okapi BM25 search over a directory of documents.")
    parser.add_argument("corpus", type=Path, help="Directory of documents to index.")
    parser.add_argument("query", nargs="*", help="Query terms. Omit for an interactive prompt.")
    parser.add_argument(
        "--top",
        type=non_negative_int,
        default=None,
        help="Number of top results to show (default: all matches).",
    )
    parser.add_argument(
        "--scores",
        action="store_true",
        help="Show BM25 scores next to titles.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    args = parser.parse_args(list(argv) if argv is not None else None)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        index = build_index_from_directory(args.corpus)
    except (IndexBuildError, EmptyCorpusError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    engine = QueryEngine(index)
    if args.query:
        print_results(engine, " ".join(args.query), args.top, args.scores)
    else:
        run_search_loop(engine, args.top, args.scores)
    return 0


if __name__ == "__main__":
    sys.exit(main())
