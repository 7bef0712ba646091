import pytest

from okapi_search.errors import EmptyCorpusError, IndexFinalizedError, IndexNotBuiltError
from okapi_search.posting import InvertedIndex, Posting


def _index_of(*docs):
    index = InvertedIndex()
    for title, tokens in docs:
        doc_id = index.next_doc_id
        for token in tokens:
            index.add_term(token, doc_id)
        index.add_document(title, len(tokens))
    return index


def test_add_term_counts_repeats_in_last_posting():
    index = _index_of(("d0", ["x", "y", "x"]), ("d1", ["x"]), ("d2", ["y", "y"]))
    assert index.get_postings("x") == [Posting(0, 2), Posting(1, 1)]
    assert index.get_postings("y") == [Posting(0, 1), Posting(2, 2)]
    assert index.document_frequency("y") == 2
    assert index.get_postings("missing") == []
    assert "x" in index and "missing" not in index
    assert sorted(index.terms()) == ["x", "y"]


def test_finalize_computes_average_length():
    index = _index_of(("d0", ["x", "y", "x"]), ("d1", ["x"]))
    index.finalize()
    assert index.finalized
    assert index.document_count == 2
    assert index.average_document_length == 2.0
    assert index.title(1) == "d1"
    assert index.document_length(0) == 3

    stats = index.stats()
    assert (stats.num_documents, stats.num_terms, stats.total_tokens) == (2, 2, 4)
    assert index.vocabulary_size == len(index) == 2


def test_average_length_unavailable_before_finalize():
    index = _index_of(("d0", ["x"]))
    assert not index.finalized
    with pytest.raises(IndexNotBuiltError):
        index.average_document_length


def test_finalize_empty_index_reports_empty_corpus():
    with pytest.raises(EmptyCorpusError):
        InvertedIndex().finalize()


def test_finalized_index_is_read_only():
    index = _index_of(("d0", ["x"]))
    index.finalize()
    with pytest.raises(IndexFinalizedError):
        index.add_term("x", 0)
    with pytest.raises(IndexFinalizedError):
        index.add_document("d1", 0)
    with pytest.raises(IndexFinalizedError):
        index.finalize()
