"""
Okapi BM25 per-term scoring.

    idf(t)     = ln(1 + (N - df + 0.5) / (df + 0.5))
    score(t,d) = idf(t) * tf * (K1 + 1) / (tf + K1 * (1 - B + B * dl / avgdl))

The "+ 1" inside the log keeps idf positive when a term occurs in every document.
"""

import math

# Term frequency saturation
K1 = 1.5
# Document length normalization
B = 0.75


def idf(total_documents: int, document_frequency: int) -> float:
    """Inverse document frequency; decreases as the term appears in more documents."""
    return math.log(
        1.0 + (total_documents - document_frequency + 0.5) / (document_frequency + 0.5)
    )


def score(
    tf: int,
    doc_length: int,
    avg_doc_length: float,
    total_documents: int,
    document_frequency: int,
) -> float:
    """BM25 contribution of a single term to a single document's score."""
    norm = 1.0 - B + B * (doc_length / avg_doc_length)
    saturation = tf * (K1 + 1.0) / (tf + K1 * norm)
    return idf(total_documents, document_frequency) * saturation
