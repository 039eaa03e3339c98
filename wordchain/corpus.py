import logging
from pathlib import Path

from .tokens import tokenize

logger = logging.getLogger(__name__)

DEFAULT_CORPUS = [
    "The old house stood at the end of the lane.",
    "Nobody had lived in the old house for many years.",
    "At night the wind moved through the empty rooms.",
    "Did the neighbours ever hear voices in the house?",
    "They said the lamp in the tower burned until dawn.",
    "Mr. Hale walked past the gate every evening.",
    "He never once looked up at the tower!",
    "The lane was quiet and the gate was always closed.",
]

def read_corpus(path):
    """
    Read a training text file. Returns the whole text as one string.
    """
    with open(path, "r", encoding="utf-8") as f:
        return f.read()

def load_corpus_tokens(path=None):
    """
    Tokens for training: from `path` when it exists, otherwise the built-in
    DEFAULT_CORPUS.
    """
    if path is not None and Path(path).exists():
        tokens = tokenize(read_corpus(path))
        logger.info("Loaded %d tokens from %s", len(tokens), path)
        return tokens
    if path is not None:
        logger.warning("Corpus file %s not found; using the built-in corpus", path)
    return tokenize(" ".join(DEFAULT_CORPUS))
