"""
Index builder: constructs an in-memory inverted index from a directory of documents.
Files are ingested one at a time in sorted path order; each file becomes one
document whose id is its position in that order.
"""

import logging
import os
import stat
from pathlib import Path

from .errors import EmptyCorpusError, IndexBuildError
from .posting import InvertedIndex
from .tokenizer import iter_tokens, read_document_lines

logger = logging.getLogger(__name__)


def document_title(filepath: Path) -> str:
    """Title of a document: file name without directory or extension."""
    return Path(filepath).stem


def _raise_walk_error(error: OSError) -> None:
    raise error


def list_documents(data_dir: Path) -> list[Path]:
    """
    Return every regular file under data_dir (recursive), sorted by path.
    A path that is itself a file is a one-document corpus.
    Any directory that cannot be listed or entry that cannot be stat'ed
    fails the whole listing.
    """
    data_dir = Path(data_dir)
    try:
        if data_dir.is_file():
            return [data_dir]
        if not data_dir.is_dir():
            raise FileNotFoundError(f"No such directory: {data_dir}")
        paths: list[Path] = []
        for dirpath, _dirnames, filenames in os.walk(data_dir, onerror=_raise_walk_error):
            for name in filenames:
                path = Path(dirpath) / name
                if stat.S_ISREG(path.stat().st_mode):
                    paths.append(path)
        return sorted(paths, key=lambda p: str(p))
    except OSError as e:
        logger.error("Could not list %s: %s", data_dir, e)
        raise IndexBuildError(data_dir, str(e)) from e


def index_document(index: InvertedIndex, filepath: Path) -> int:
    """
    Tokenize one file line by line and add its terms to the index.
    Returns the new document's id.
    """
    doc_id = index.next_doc_id
    try:
        lines = read_document_lines(filepath)
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Could not read %s: %s", filepath, e)
        raise IndexBuildError(filepath, str(e)) from e

    length = 0
    for line in lines:
        for token in iter_tokens(line):
            index.add_term(token, doc_id)
            length += 1

    title = document_title(filepath)
    index.add_document(title, length)
    logger.debug("Indexed doc %d %r (%d tokens)", doc_id, title, length)
    return doc_id


def build_index_from_directory(data_dir: Path) -> InvertedIndex:
    """
    Build an inverted index from all files in a directory (recursive).
    Raises IndexBuildError on any I/O failure and EmptyCorpusError when no
    documents were found. The returned index is finalized and read-only.
    """
    data_dir = Path(data_dir)
    index = InvertedIndex()

    for filepath in list_documents(data_dir):
        index_document(index, filepath)

    if index.document_count == 0:
        logger.warning("No documents found in %s", data_dir)
        raise EmptyCorpusError(data_dir)

    index.finalize()
    logger.info(
        "Indexed %d documents, %d unique terms, avg length %.2f",
        index.document_count,
        len(index),
        index.average_document_length,
    )
    return index
