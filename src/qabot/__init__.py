"""Question/answer retrieval over a fixed plain-text corpus.

The statistical engine lives in :mod:`qabot.index` and only ever sees token
sequences, so the default stemming tokenizer in :mod:`qabot.clean` can be
swapped for any ``str -> list[str]`` callable.
"""
