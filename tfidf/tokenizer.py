# tfidf/tokenizer.py
"""
Tokenizer module.

Splits text on whitespace into terms for the Lexicon. Punctuation
separated by spaces stays a term of its own ("Call me Ishmael ." gives
four terms). Lower-casing, stopword removal and Porter stemming (nltk)
are optional.
"""

from typing import Iterable, Iterator, List, Optional


class Tokenizer:
    """
    The Tokenizer class.

    Parameters:
        lowercase : bool
            Fold terms to lower case (default True).
        use_stemmer : bool
            Whether to apply stemming using nltk's Porter Stemmer.
        custom_stopwords : Optional[Iterable[str]]
            Terms to drop after normalization. Nothing is dropped by default.
    """
    def __init__(self, lowercase: bool = True, use_stemmer: bool = False,
                 custom_stopwords: Optional[Iterable[str]] = None):
        self.lowercase = lowercase
        self.stopwords = set(custom_stopwords) if custom_stopwords is not None else set()

        # Enable or disable stemming functionality
        self.use_stemmer = use_stemmer
        if self.use_stemmer:
            from nltk.stem.porter import PorterStemmer
            self.stemmer = PorterStemmer()

    def tokenize(self, text: Optional[str]) -> List[str]:
        """
        Tokenize an input string into terms.

        Here we are performing the normalization pipeline step-by-step:
          1. Split on runs of whitespace
          2. Convert each term to lowercase (if enabled)
          3. Filter out stopwords
          4. Apply stemming if requested
        """
        if text is None:
            return []

        tokens = []
        for token in text.split():
            if self.lowercase:
                token = token.lower()

            if token in self.stopwords:
                continue

            if self.use_stemmer:
                token = self.stemmer.stem(token)

            tokens.append(token)

        return tokens

    def token_stream(self, texts: Iterable[str]) -> Iterator[str]:
        """
        Tokenize, but over an iterable of texts
        """
        for text in texts:
            yield from self.tokenize(text)
