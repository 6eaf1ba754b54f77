# tfidf/accumulator.py
"""
Shared TF/IDF statistics over a stream of tokenized documents.

The TFIDF accumulator keeps:
 - document frequency per token id (how many documents contained it)
 - inverse document frequency per token id, ln(N / df)
 - the number of documents observed

All state sits behind one lock, so add(), recompute_idf() and score()
can be called from any number of threads.
"""

import logging
import math
import threading
from collections import Counter
from typing import Dict, Iterable, List, Protocol, Union

logger = logging.getLogger(__name__)


class EmptyDocumentError(ValueError):
    """Raised when scoring a document with no tokens."""


class Document(Protocol):
    def ids(self) -> Iterable[int]: ...


DocumentLike = Union[Iterable[int], Document]


def document_ids(doc: DocumentLike) -> List[int]:
    """Token ids of `doc`, which is a plain sequence of ids or has .ids()."""
    ids = doc.ids() if hasattr(doc, "ids") else doc
    return list(ids)


class TFIDF:
    def __init__(self):
        # token id → number of documents containing it
        self._df: Dict[int, int] = {}
        # token id → ln(docs / df), rebuilt by recompute_idf()
        self._idf: Dict[int, float] = {}
        self._docs: int = 0

        # one lock for df, idf and the document counter together
        self._lock = threading.Lock()

    # ---------------------------------------------------------
    # DOCUMENT INGESTION
    # ---------------------------------------------------------
    def add(self, doc: DocumentLike) -> None:
        """
        Count one document. Each distinct token id is counted once,
        however often it repeats inside the document.
        """
        # here, we are reducing the document to its distinct ids before locking
        unique = set(document_ids(doc))

        with self._lock:
            for token in unique:
                self._df[token] = self._df.get(token, 0) + 1
            self._docs += 1

    # ---------------------------------------------------------
    # IDF
    # ---------------------------------------------------------
    def recompute_idf(self) -> None:
        """
        Rebuild the IDF table from the current frequencies.

        Not incremental: call again after adding documents to see them
        reflected in scores. With no documents the table stays empty.
        """
        with self._lock:
            docs = float(self._docs)
            if not self._docs:
                logger.warning("recompute_idf called on an empty corpus; IDF table left empty")
                return
            for token, freq in self._df.items():
                self._idf[token] = math.log(docs / freq)
            logger.debug("recomputed IDF for %d tokens over %d documents", len(self._idf), self._docs)

    calculate_idf = recompute_idf

    # ---------------------------------------------------------
    # SCORING
    # ---------------------------------------------------------
    def score(self, doc: DocumentLike) -> List[float]:
        """
        TF * IDF for every token of `doc`, in input order.

        TF is the token's count within `doc` divided by len(doc). Tokens
        without an IDF entry score 0.0. The document is not added to the
        corpus and the shared frequencies are left untouched.

        Raises EmptyDocumentError for an empty document.
        """
        ids = document_ids(doc)
        if not ids:
            raise EmptyDocumentError("cannot score an empty document")

        # local tally only, never the shared frequency table
        counts = Counter(ids)
        with self._lock:
            idf = {token: self._idf.get(token, 0.0) for token in counts}

        length = float(len(ids))
        return [(counts[token] / length) * idf[token] for token in ids]

    # ---------------------------------------------------------
    # ACCESS HELPERS
    # ---------------------------------------------------------
    @property
    def docs(self) -> int:
        with self._lock:
            return self._docs

    def doc_frequency(self, token: int) -> int:
        with self._lock:
            return self._df.get(token, 0)

    def idf(self, token: int) -> float:
        with self._lock:
            return self._idf.get(token, 0.0)

    def frequencies(self) -> Dict[int, int]:
        """Copy of the document-frequency table."""
        with self._lock:
            return dict(self._df)

    def idf_table(self) -> Dict[int, float]:
        """Copy of the IDF table as of the last recompute."""
        with self._lock:
            return dict(self._idf)

    def __len__(self) -> int:
        with self._lock:
            return len(self._df)
