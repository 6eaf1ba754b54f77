# ======================================================
# tests/test_moby_dick.py
# ======================================================
# Here, we are running the full pipeline over the opening of Moby-Dick:
#   - whitespace tokenization and lower-casing
#   - lexicon ids feeding the TFIDF accumulator
#   - IDF values and per-token scores for the first sentence
#   - cosine ranking of two queries
# ======================================================

import math
import unittest

from tfidf import TFIDF, Lexicon, rank

MOBY_DICK = [
    "Call me Ishmael .",
    "Some years ago -- never mind how long precisely -- having little or no money in my purse , and nothing particular to interest me on shore , I thought I would sail about a little and see the watery part of the world .",
    "It is a way I have of driving off the spleen and regulating the circulation .",
    "Whenever I find myself growing grim about the mouth ; ",
    "whenever it is a damp , drizzly November in my soul ; ",
    "whenever I find myself involuntarily pausing before coffin warehouses , and bringing up the rear of every funeral I meet ; ",
    "and especially whenever my hypos get such an upper hand of me , that it requires a strong moral principle to prevent me from deliberately stepping into the street , and methodically knocking people's hats off -- then , I account it high time to get to sea as soon as I can .",
    "This is my substitute for pistol and ball . ",
    "With a philosophical flourish Cato throws himself upon his sword ; ",
    "I quietly take to the ship . There is nothing surprising in this .",
    "If they but knew it , almost all men in their degree , some time or other , cherish very nearly the same feelings towards the ocean with me .",
]


class TestMobyDick(unittest.TestCase):

    def setUp(self):
        self.lexicon = Lexicon()
        self.docs = [self.lexicon.encode(s) for s in MOBY_DICK]
        self.tfidf = TFIDF()
        for doc in self.docs:
            self.tfidf.add(doc)
        self.tfidf.recompute_idf()

    def idf(self, term):
        return self.tfidf.idf(self.lexicon.lookup(term))

    def test_first_ids_follow_first_sentence(self):
        self.assertEqual(self.docs[0], [0, 1, 2, 3])
        self.assertEqual(self.lexicon.get_term(2), "ishmael")

    def test_idf_values(self):
        self.assertEqual(self.tfidf.docs, 11)
        self.assertAlmostEqual(self.idf("ishmael"), math.log(11.0), delta=1e-9)
        self.assertAlmostEqual(self.idf("ishmael"), 2.4, places=1)
        self.assertAlmostEqual(self.idf("me"), math.log(11.0 / 4.0), delta=1e-9)
        self.assertAlmostEqual(self.idf("me"), 1.0, places=1)
        self.assertAlmostEqual(self.idf("."), math.log(11.0 / 7.0), delta=1e-9)
        self.assertAlmostEqual(self.idf("some"), math.log(11.0 / 2.0), delta=1e-9)
        self.assertAlmostEqual(self.idf("--"), math.log(11.0 / 2.0), delta=1e-9)

    def test_first_document_scores(self):
        scores = self.tfidf.score(self.docs[0])
        self.assertEqual(len(scores), 4)
        for token, score in zip(self.docs[0], scores):
            self.assertAlmostEqual(score, 0.25 * self.tfidf.idf(token), delta=1e-12)

    def test_rank_ishmael(self):
        query = self.lexicon.encode("ishmael", grow=False)
        results = rank(self.tfidf, query, self.docs)
        self.assertEqual([d for d, _ in results], [0])
        self.assertAlmostEqual(results[0][1], 1.0, places=9)

    def test_rank_whenever_i_find(self):
        query = self.lexicon.encode("whenever i find", grow=False)
        results = rank(self.tfidf, query, self.docs)
        # here, we are expecting only the two sentences holding all three terms
        self.assertEqual([d for d, _ in results], [3, 5])
        # every term of sentence 3 appears once, so it is parallel to the query
        self.assertAlmostEqual(results[0][1], 1.0, places=9)
        self.assertGreater(results[1][1], 0.9)
        self.assertLess(results[1][1], results[0][1])

    def test_ranking_leaves_statistics_alone(self):
        freqs = self.tfidf.frequencies()
        query = self.lexicon.encode("whenever i find", grow=False)
        rank(self.tfidf, query, self.docs)
        self.assertEqual(self.tfidf.frequencies(), freqs)
        self.assertEqual(self.tfidf.docs, 11)


if __name__ == "__main__":
    unittest.main()
