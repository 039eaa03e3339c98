"""
Top-level facade over one sentence model.
"""
from .base import SentenceModel
from .graph_model import TransitionGraph
from .tokens import tokenize
from .trie_model import TransitionTrie

MODEL_KINDS = {
    "graph": TransitionGraph,
    "trie": TransitionTrie,
}


def build_model(kind, rng=None, observer=None) -> SentenceModel:
    """
    kind: "graph" or "trie"
    """
    try:
        model_cls = MODEL_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown model kind {kind!r}; expected one of {sorted(MODEL_KINDS)}") from None
    return model_cls(rng=rng, observer=observer)


class SentenceGenerator:
    """
    Delegates one-to-one to a single model. Instances never share state.
    """

    def __init__(self, model: SentenceModel):
        self.model = model

    @classmethod
    def of_kind(cls, kind, rng=None, observer=None):
        return cls(build_model(kind, rng=rng, observer=observer))

    def ingest(self, tokens):
        self.model.add(list(tokens))

    def train_text(self, text):
        """
        Tokenize raw text and ingest it. Returns the number of tokens learned.
        """
        tokens = tokenize(text)
        self.ingest(tokens)
        return len(tokens)

    def generate(self) -> str:
        return self.model.generate_sentence()

    def reset(self):
        self.model.reset()

    def describe(self) -> str:
        return self.model.describe()
