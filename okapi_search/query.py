"""
Query engine: OR-union retrieval over the inverted index ranked by BM25.

Queries are tokenized with the same rules as indexing. Every document that
contains at least one query term receives the sum of its per-term BM25
scores; documents matching no query term are not returned.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from . import bm25
from .errors import IndexNotBuiltError
from .posting import InvertedIndex
from .tokenizer import tokenize


@dataclass(frozen=True)
class RankedDocument:
    doc_id: int
    title: str
    score: float


def normalize_query(raw_query: str) -> List[str]:
    """
    Tokenize the raw query using the same logic as indexing.
    Repeated tokens are kept once, in first-seen order.
    """
    return list(dict.fromkeys(tokenize(raw_query)))


class QueryEngine:
    """Read-only ranking over a finalized index. Safe to share between threads."""

    def __init__(self, index: InvertedIndex) -> None:
        if not index.finalized:
            raise IndexNotBuiltError("Index must be finalized before it can be queried")
        self.index = index

    def score_documents(self, terms: List[str]) -> Dict[int, float]:
        """Accumulate BM25 scores per doc_id over the postings of each known term."""
        index = self.index
        n_docs = index.document_count
        avg_len = index.average_document_length
        scores: Dict[int, float] = {}
        for term in terms:
            postings = index.get_postings(term)
            if not postings:
                continue
            df = len(postings)
            for p in postings:
                contribution = bm25.score(
                    p.tf, index.document_length(p.doc_id), avg_len, n_docs, df
                )
                scores[p.doc_id] = scores.get(p.doc_id, 0.0) + contribution
        return scores

    def rank(self, raw_query: str, top_k: int | None = None) -> List[RankedDocument]:
        """
        Rank matching documents by score descending, ties by ascending doc_id.
        """
        if top_k is not None and top_k < 0:
            raise ValueError(f"top_k must be non-negative, got {top_k}")
        scores = self.score_documents(normalize_query(raw_query))
        ranked = sorted(scores.items(), key=lambda x: (-x[1], x[0]))
        if top_k is not None:
            ranked = ranked[:top_k]
        return [
            RankedDocument(doc_id=doc_id, title=self.index.title(doc_id), score=score)
            for doc_id, score in ranked
        ]

    def search(self, raw_query: str, top_k: int | None = None) -> List[str]:
        """Return titles of matching documents, most relevant first."""
        return [doc.title for doc in self.rank(raw_query, top_k=top_k)]


def search(index: InvertedIndex, raw_query: str, top_k: int | None = None) -> List[str]:
    return QueryEngine(index).search(raw_query, top_k=top_k)
