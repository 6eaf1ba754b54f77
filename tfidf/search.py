# tfidf/search.py
"""
Ranked retrieval on top of the TFIDF accumulator.

Implements:
 - conjunctive filtering: only documents holding every query term are ranked
 - TF-IDF cosine similarity between the query and each remaining document
 - Uses TFIDF.score() for both sides, so query and documents share one IDF
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from .accumulator import TFIDF, DocumentLike, document_ids


def containing(query_ids: Sequence[int], documents: Sequence[DocumentLike]) -> List[int]:
    """
    Indices of the documents that contain every distinct query id.
    """
    wanted = set(query_ids)
    hits = []
    for i, doc in enumerate(documents):
        if wanted.issubset(document_ids(doc)):
            hits.append(i)
    return hits


def cosine_similarity(query_vec, doc_matrix) -> np.ndarray:
    """
    Cosine similarity of `query_vec` against every row of `doc_matrix`.
    Rows (or a query) with zero norm score 0.0.
    """
    q = np.asarray(query_vec, dtype=np.float64)
    m = np.atleast_2d(np.asarray(doc_matrix, dtype=np.float64))

    dots = m @ q
    norms = np.linalg.norm(m, axis=1) * np.linalg.norm(q)

    out = np.zeros_like(dots)
    np.divide(dots, norms, out=out, where=norms > 0)
    return out


def rank(tfidf: TFIDF, query: DocumentLike, documents: Sequence[DocumentLike],
         top_k: Optional[int] = None) -> List[Tuple[int, float]]:
    """
    Rank `documents` against `query` by TF-IDF cosine similarity.

    Returns (document index, similarity) pairs, best first. Documents
    missing any query term are left out.
    """
    q_ids = document_ids(query)
    q_scores = tfidf.score(q_ids)

    # here, we are keeping one weight per distinct term, in query order
    terms = list(dict.fromkeys(q_ids))
    q_vec = [q_scores[q_ids.index(t)] for t in terms]

    candidates = containing(terms, documents)
    if not candidates:
        return []

    rows = []
    for i in candidates:
        doc = document_ids(documents[i])
        d_scores = tfidf.score(doc)
        rows.append([d_scores[doc.index(t)] for t in terms])

    sims = cosine_similarity(q_vec, rows)

    final = [(d, float(s)) for d, s in zip(candidates, sims)]
    final.sort(key=lambda x: x[1], reverse=True)
    if top_k is not None:
        final = final[:top_k]
    return final
