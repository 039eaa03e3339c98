# config.py
import os

# Server config
HOST = os.getenv("WORDCHAIN_HOST", "127.0.0.1")
PORT = int(os.getenv("WORDCHAIN_PORT", "8000"))

# Corpus used to train both models on startup; falls back to corpus.DEFAULT_CORPUS
CORPUS_FILE = os.getenv("WORDCHAIN_CORPUS", "data/corpus.txt")

# Generation config
DEFAULT_MODEL = "graph"
MAX_SENTENCES = 20     # upper bound on sentences per generate request

# Fixed seed for reproducible output; unset means system randomness
RANDOM_SEED = int(os.environ["WORDCHAIN_SEED"]) if os.getenv("WORDCHAIN_SEED") else None

# Logging
LOG_LEVEL = os.getenv("WORDCHAIN_LOG_LEVEL", "INFO").upper()
TRACE_SAMPLING = os.getenv("WORDCHAIN_TRACE", "").lower() in ("1", "true", "yes")
