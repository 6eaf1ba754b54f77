# ======================================================
# run_demo.py
# ======================================================
import argparse
import logging

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


def build_corpus(texts):
    print("=== Building TF/IDF statistics from Moby-Dick ===")

    lexicon = Lexicon()
    docs = [lexicon.encode(t) for t in texts]

    tfidf = TFIDF()
    for doc in docs:
        tfidf.add(doc)
    tfidf.recompute_idf()

    print(f"Indexed {tfidf.docs} documents.")
    print(f"Vocabulary size: {len(lexicon)} unique tokens.")

    print("IDF:")
    for i in range(min(11, len(lexicon))):
        print(f"\t{lexicon.get_term(i)!r}: {tfidf.idf(i):.1f}")

    return lexicon, tfidf, docs


def demo_queries(lexicon, tfidf, docs, queries, top_k):
    for query in queries:
        try:
            q_ids = lexicon.encode(query, grow=False)
        except KeyError as e:
            print(f"=== Skipping {query!r}: {e} ===")
            continue
        if not q_ids:
            continue

        print(f"=== Relevant docs to {query!r} ===")
        results = rank(tfidf, q_ids, docs, top_k=top_k)
        if not results:
            print("No documents contain every query term.")
        for doc_id, score in results:
            print(f"\tID   : {doc_id}\n\tScore: {score:.3f}\n\tDoc  : {MOBY_DICK[doc_id]!r}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="TF/IDF ranking over a few Moby-Dick sentences")
    parser.add_argument("--query", action="append", help="query text (repeatable)")
    parser.add_argument("--top-k", type=int, default=None)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    lexicon, tfidf, docs = build_corpus(MOBY_DICK)
    demo_queries(lexicon, tfidf, docs, args.query or ["ishmael", "whenever i find"], args.top_k)
