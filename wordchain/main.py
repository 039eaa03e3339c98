import logging
import random
import threading
from typing import List, Literal, Optional

import uvicorn
from fastapi import FastAPI, BackgroundTasks, HTTPException
from pydantic import BaseModel, Field

from .chain import SentenceGenerator
from .config import (
    CORPUS_FILE,
    DEFAULT_MODEL,
    HOST,
    LOG_LEVEL,
    MAX_SENTENCES,
    PORT,
    RANDOM_SEED,
    TRACE_SAMPLING,
)
from .corpus import load_corpus_tokens
from .sampling import logging_observer
from .tokens import tokenize

logger = logging.getLogger(__name__)


def setup_logging(level=LOG_LEVEL):
    """Configure logging."""
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


app = FastAPI(title="wordchain: weighted word-transition sentence generator")

# -----------------------
# Model setup
# -----------------------
# The models are not thread-safe; every access goes through the model's lock.
_observer = logging_observer if TRACE_SAMPLING else None
generators = {
    "graph": SentenceGenerator.of_kind("graph", rng=random.Random(RANDOM_SEED), observer=_observer),
    "trie": SentenceGenerator.of_kind("trie", rng=random.Random(RANDOM_SEED), observer=_observer),
}
locks = {kind: threading.Lock() for kind in generators}

def _selected(kind: str) -> List[str]:
    return list(generators) if kind == "both" else [kind]

def train_models(tokens: List[str], kind: str = "both") -> int:
    for name in _selected(kind):
        with locks[name]:
            generators[name].ingest(tokens)
            logger.info("[%s] trained on %d tokens: %s", name, len(tokens), generators[name].describe())
    return len(tokens)

def reset_models(kind: str = "both"):
    for name in _selected(kind):
        with locks[name]:
            generators[name].reset()
        logger.info("[%s] reset", name)

def generate_sentences(kind: str, count: int) -> List[str]:
    with locks[kind]:
        return [generators[kind].generate() for _ in range(count)]

train_models(load_corpus_tokens(CORPUS_FILE))

# -----------------------
# Request schemas
# -----------------------
ModelSelection = Literal["graph", "trie", "both"]

class GenerateRequest(BaseModel):
    count: int = Field(1, ge=1, le=MAX_SENTENCES)
    # /generate only; falls back to DEFAULT_MODEL
    model: Optional[Literal["graph", "trie"]] = None

class TrainRequest(BaseModel):
    # raw text to learn from; whitespace-split, punctuation kept on the words
    text: Optional[str] = None
    use_default_corpus: bool = False
    model: ModelSelection = "both"
    background: bool = False

class ResetRequest(BaseModel):
    model: ModelSelection = "both"

# -----------------------
# Root & status
# -----------------------
@app.get("/")
def root():
    return {"status": "wordchain API Active", "models": list(generators)}

@app.get("/model/status")
def model_status():
    status = {}
    for name, generator in generators.items():
        with locks[name]:
            status[name] = generator.describe()
    return status

# -----------------------
# Generation
# -----------------------
@app.post("/generate")
@app.post("/generate_text")
def generate_text(req: GenerateRequest):
    kind = req.model or DEFAULT_MODEL
    try:
        return {"sentences": generate_sentences(kind, req.count), "model": kind}
    except Exception as e:
        logger.exception("Generation with %s failed", kind)
        raise HTTPException(status_code=500, detail=f"Generation with {kind} failed: {e}")

@app.post("/generate_with_trie")
def generate_with_trie(req: GenerateRequest):
    try:
        return {"sentences": generate_sentences("trie", req.count), "model": "trie"}
    except Exception as e:
        logger.exception("Trie generation failed")
        raise HTTPException(status_code=500, detail=f"Trie generation failed: {e}")

# -----------------------
# Training & reset
# -----------------------
@app.post("/train")
def api_train(req: TrainRequest, background_tasks: BackgroundTasks):
    if req.use_default_corpus:
        tokens = load_corpus_tokens(CORPUS_FILE)
    elif req.text:
        tokens = tokenize(req.text)
    else:
        raise HTTPException(status_code=400, detail="Provide text or set use_default_corpus.")

    if req.background:
        def run_training():
            try:
                train_models(tokens, req.model)
                logger.info("[train] Complete")
            except Exception:
                logger.exception("[train] Failed")

        background_tasks.add_task(run_training)
        return {"status": "started", "model": req.model, "tokens": len(tokens)}

    try:
        trained = train_models(tokens, req.model)
    except Exception as e:
        logger.exception("Training failed")
        raise HTTPException(status_code=500, detail=f"Training failed: {e}")
    return {"status": "trained", "model": req.model, "tokens": trained}

@app.post("/reset")
def api_reset(req: ResetRequest):
    reset_models(req.model)
    return {"status": "reset", "model": req.model}


def run():
    setup_logging()
    uvicorn.run("wordchain.main:app", host=HOST, port=PORT, reload=False)


if __name__ == "__main__":
    run()
