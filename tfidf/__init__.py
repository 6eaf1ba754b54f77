"""tfidf - thread-safe TF/IDF statistics over a stream of tokenized documents."""

from tfidf.accumulator import TFIDF, Document, EmptyDocumentError, document_ids
from tfidf.tokenizer import Tokenizer
from tfidf.lexicon import Lexicon
from tfidf.search import containing, cosine_similarity, rank

__all__ = [
    "TFIDF",
    "Document",
    "EmptyDocumentError",
    "document_ids",
    "Tokenizer",
    "Lexicon",
    "containing",
    "cosine_similarity",
    "rank",
]
