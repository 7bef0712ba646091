import math

import pytest

from okapi_search import bm25


def test_constants():
    assert bm25.K1 == 1.5
    assert bm25.B == 0.75


def test_score_matches_hand_computed_value():
    # tf=1, dl=3, avgdl=4.5, N=2, df=2
    # idf = ln(1 + 0.5 / 2.5) = ln(1.2); norm = 0.25 + 0.75 * 3 / 4.5 = 0.75
    expected = math.log(1.2) * (1 * 2.5) / (1 + 1.5 * 0.75)
    assert bm25.score(1, 3, 4.5, 2, 2) == pytest.approx(expected)


def test_idf_positive_when_term_in_every_document():
    assert bm25.idf(10, 10) > 0.0
    assert bm25.score(1, 5, 5.0, 10, 10) > 0.0


def test_rarer_terms_weigh_more():
    assert bm25.idf(100, 1) > bm25.idf(100, 10) > bm25.idf(100, 100)


def test_score_grows_and_saturates_with_tf():
    s1 = bm25.score(1, 10, 10.0, 50, 5)
    s2 = bm25.score(2, 10, 10.0, 50, 5)
    s100 = bm25.score(100, 10, 10.0, 50, 5)
    assert s1 < s2 < s100
    assert s100 < bm25.idf(50, 5) * (bm25.K1 + 1)


def test_longer_documents_score_lower():
    assert bm25.score(1, 5, 10.0, 50, 5) > bm25.score(1, 20, 10.0, 50, 5)
