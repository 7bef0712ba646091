"""
Posting and inverted index data structures.

A posting represents a term's occurrence in a document: document id and term frequency.
The index also acts as the document store (title and length per document id) and
holds the corpus statistics used for BM25 ranking.
"""

from dataclasses import dataclass
from typing import Iterator

from .errors import EmptyCorpusError, IndexFinalizedError, IndexNotBuiltError


@dataclass
class Posting:
    """
    Represents a term's occurrence in a document.
    - doc_id: dense, zero-based document identifier
    - tf: number of occurrences of the term in the document
    """

    doc_id: int
    tf: int = 1

    def __repr__(self) -> str:
        return f"Posting(doc_id={self.doc_id!r}, tf={self.tf})"


@dataclass(frozen=True)
class DocumentInfo:
    title: str
    length: int


@dataclass(frozen=True)
class IndexStats:
    """Summary of a finalized index for reporting."""

    num_documents: int
    num_terms: int
    total_tokens: int
    average_document_length: float


class InvertedIndex:
    """
    Inverted index: map from term -> list of postings, plus per-document metadata.

    Built in two phases: documents are ingested one at a time (add_term /
    add_document), then finalize() computes the average document length and
    freezes the index. Queries only read a finalized index.
    """

    def __init__(self) -> None:
        self._index: dict[str, list[Posting]] = {}
        self._documents: list[DocumentInfo] = []
        self._avg_doc_length: float | None = None

    @property
    def finalized(self) -> bool:
        return self._avg_doc_length is not None

    def _check_mutable(self) -> None:
        if self.finalized:
            raise IndexFinalizedError("Index is finalized and read-only")

    def add_term(self, term: str, doc_id: int) -> None:
        """
        Record one occurrence of term in document doc_id.
        Documents must be ingested one at a time in ascending id order: a new
        posting is appended only when the last posting belongs to another document.
        """
        self._check_mutable()
        postings = self._index.get(term)
        if postings is None:
            postings = []
            self._index[term] = postings
        if not postings or postings[-1].doc_id != doc_id:
            postings.append(Posting(doc_id=doc_id, tf=1))
        else:
            postings[-1].tf += 1

    def add_document(self, title: str, length: int) -> int:
        """Register a document's title and token count; return its id."""
        self._check_mutable()
        self._documents.append(DocumentInfo(title=title, length=length))
        return len(self._documents) - 1

    @property
    def next_doc_id(self) -> int:
        return len(self._documents)

    def finalize(self) -> None:
        """Compute corpus statistics. An empty corpus has no average length."""
        self._check_mutable()
        if not self._documents:
            raise EmptyCorpusError()
        self._avg_doc_length = self.total_tokens / len(self._documents)

    @property
    def document_count(self) -> int:
        return len(self._documents)

    @property
    def vocabulary_size(self) -> int:
        return len(self._index)

    @property
    def total_tokens(self) -> int:
        return sum(doc.length for doc in self._documents)

    @property
    def average_document_length(self) -> float:
        if self._avg_doc_length is None:
            raise IndexNotBuiltError("Index has not been finalized")
        return self._avg_doc_length

    def get_postings(self, term: str) -> list[Posting]:
        """Return the list of postings for a term, or empty list."""
        return self._index.get(term, [])

    def document_frequency(self, term: str) -> int:
        return len(self._index.get(term, ()))

    def title(self, doc_id: int) -> str:
        return self._documents[doc_id].title

    def document_length(self, doc_id: int) -> int:
        return self._documents[doc_id].length

    def terms(self) -> Iterator[str]:
        """Iterate over all terms in the index."""
        return iter(self._index)

    def stats(self) -> IndexStats:
        return IndexStats(
            num_documents=self.document_count,
            num_terms=self.vocabulary_size,
            total_tokens=self.total_tokens,
            average_document_length=self.average_document_length,
        )

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, term: str) -> bool:
        return term in self._index
