"""In-memory Okapi BM25 search engine package."""

from .posting import Posting, InvertedIndex, IndexStats
from .index_builder import build_index_from_directory
from .query import QueryEngine, RankedDocument, search
from .tokenizer import tokenize, iter_tokens
from .errors import (
    SearchError,
    IndexBuildError,
    EmptyCorpusError,
    IndexNotBuiltError,
    IndexFinalizedError,
)
