"""
Build the in-memory inverted index for a corpus and print index analytics.

Usage:
    python build_index.py shakespeare

Every regular file under the directory (recursive) is one document.
Output: analytics table printed to console.
"""

import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent))

from okapi_search.errors import EmptyCorpusError, IndexBuildError
from okapi_search.index_builder import build_index_from_directory


def main() -> None:
    import argparse
    parser = argparse.ArgumentParser(description="Build inverted index and print analytics")
    parser.add_argument("corpus", type=Path, help="Directory of documents to index")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        index = build_index_from_directory(args.corpus)
    except EmptyCorpusError:
        print(f"No documents found in {args.corpus}.")
        sys.exit(1)
    except IndexBuildError as e:
        print(f"Indexing failed: {e}")
        sys.exit(1)

    stats = index.stats()

    print("\n" + "=" * 50)
    print("INDEX ANALYTICS")
    print("=" * 50)
    print()
    print("| Metric                      | Value |")
    print("|-----------------------------|-------|")
    print(f"| Number of indexed documents | {stats.num_documents} |")
    print(f"| Number of unique terms      | {stats.num_terms} |")
    print(f"| Total tokens                | {stats.total_tokens} |")
    print(f"| Average document length     | {stats.average_document_length:.2f} |")
    print()


if __name__ == "__main__":
    main()
