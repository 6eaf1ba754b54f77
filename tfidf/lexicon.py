# tfidf/lexicon.py
"""
Term ↔ token id vocabulary. Ids are handed out densely from 0 in
first-seen order and never change.
"""

import threading
from typing import Dict, List, Optional

from .tokenizer import Tokenizer


class Lexicon:
    def __init__(self, tokenizer: Optional[Tokenizer] = None):
        self.tokenizer = tokenizer or Tokenizer()
        self.next_id: int = 0
        self.term_to_id: Dict[str, int] = dict()
        self.terms: List[str] = list()
        self._lock = threading.Lock()

    def get_id(self, term: str) -> int:
        with self._lock:
            if term in self.term_to_id:
                return self.term_to_id[term]

            # terms is filled before term_to_id so a published id always resolves
            term_id = self.next_id
            self.terms.append(term)
            self.next_id += 1

            self.term_to_id[term] = term_id
            return term_id

    def lookup(self, term: str) -> Optional[int]:
        with self._lock:
            return self.term_to_id.get(term)

    def get_term(self, term_id: int) -> Optional[str]:
        with self._lock:
            if term_id < 0 or term_id >= len(self.terms):
                return None
            return self.terms[term_id]

    def encode(self, text: str, grow: bool = True) -> List[int]:
        """
        Tokenize `text` and map every term to its id.

        With grow=False the vocabulary is frozen and an unseen term
        raises KeyError.
        """
        ids = []
        for term in self.tokenizer.tokenize(text):
            if grow:
                ids.append(self.get_id(term))
                continue
            term_id = self.lookup(term)
            if term_id is None:
                raise KeyError(f"Term {term!r} is not in the lexicon.")
            ids.append(term_id)
        return ids

    def __len__(self) -> int:
        with self._lock:
            return len(self.terms)

    def __contains__(self, term: str) -> bool:
        with self._lock:
            return term in self.term_to_id
