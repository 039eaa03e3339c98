import logging
from dataclasses import dataclass, field

from .base import SentenceModel
from .sampling import WeightedItem, weighted_random_pick
from .terminators import TerminatorTracker
from .tokens import is_terminal_word, normalize_word

logger = logging.getLogger(__name__)

TERMINAL = "terminal"
CONTINUE = "continue"


@dataclass(frozen=True)
class SentenceStats:
    min_length: int = 0
    max_length: int = 0
    average_length: int = 0

    @classmethod
    def from_lengths(cls, lengths):
        if not lengths:
            return cls()
        return cls(
            min_length=min(lengths),
            max_length=max(lengths),
            average_length=sum(lengths) // len(lengths),
        )


@dataclass(eq=False)
class GraphNode:
    """
    One word of the vocabulary. Successors are arena indices into the owning
    graph, so cycles never hold references to other nodes.
    """
    word: str
    index: int
    incidence: int = 1
    successors: set = field(default_factory=set)
    terminators: TerminatorTracker = field(default_factory=TerminatorTracker)

    @property
    def identifier(self):
        return self.word

    def __repr__(self):
        return f"(Word:{self.word}, Incidence: {self.incidence}, NextWords:{len(self.successors)})"


class TransitionGraph(SentenceModel):
    """
    First-order word graph. Each distinct normalized word is a single node no
    matter where it appears, and sentence length is steered by the lengths of
    the sentences seen so far.
    """

    def __init__(self, rng=None, observer=None):
        """
        rng: random.Random (or anything with uniform); None uses the random module
        observer: optional callable(event, payload) for sampling/termination traces
        """
        self.rng = rng
        self.observer = observer
        self._nodes = []
        self._index = {}
        self._sentence_lengths = []

    def __len__(self):
        return len(self._nodes)

    @property
    def nodes(self):
        return list(self._nodes)

    @property
    def sentence_lengths(self):
        return list(self._sentence_lengths)

    def node(self, word):
        """
        Look up a node by word; the word is normalized first.
        """
        index = self._index.get(normalize_word(word))
        return self._nodes[index] if index is not None else None

    def successors_of(self, node):
        return [self._nodes[i] for i in sorted(node.successors)]

    def sentence_stats(self):
        return SentenceStats.from_lengths(self._sentence_lengths)

    def add(self, tokens):
        previous = None
        sentence_length = 0
        for token in tokens:
            current = self._find_or_create(token)
            if previous is not None:
                previous.successors.add(current.index)
            previous = current
            sentence_length += 1
            if is_terminal_word(token):
                self._sentence_lengths.append(sentence_length)
                sentence_length = 0
        logger.debug(
            "Graph now has %d nodes and %d recorded sentences",
            len(self._nodes), len(self._sentence_lengths),
        )

    def generate_sentence(self):
        start = weighted_random_pick(self._nodes, rng=self.rng, observer=self.observer)
        if start is None:
            return ""

        stats = self.sentence_stats()
        words = [start.word]
        current = start
        while True:
            following = self._next_node(current, len(words), stats)
            if following is None:
                break
            words.append(following.word)
            current = following

        words[-1] += current.terminators.weighted_terminator(rng=self.rng, observer=self.observer)
        return " ".join(words)

    def reset(self):
        self._nodes.clear()
        self._index.clear()
        self._sentence_lengths.clear()

    def describe(self):
        stats = self.sentence_stats()
        common = sorted(self._nodes, key=lambda n: (-n.incidence, n.word))[:10]
        return (
            f"TransitionGraph(nodes={len(self._nodes)}, sentences={len(self._sentence_lengths)}, "
            f"min_length={stats.min_length}, max_length={stats.max_length}, "
            f"average_length={stats.average_length}, "
            f"most_common={[(n.word, n.incidence) for n in common]})"
        )

    def _find_or_create(self, token):
        word = normalize_word(token)
        index = self._index.get(word)
        if index is not None:
            node = self._nodes[index]
            node.incidence += 1
        else:
            node = GraphNode(word=word, index=len(self._nodes))
            self._nodes.append(node)
            self._index[word] = node.index
        node.terminators.observe(token)
        return node

    def _next_node(self, node, sentence_length, stats):
        """
        Returns the node to continue with, or None to end the sentence here.
        """
        successors = self.successors_of(node)
        if not successors:
            self._notify("terminate", node, sentence_length, "no successors")
            return None

        if sentence_length >= stats.max_length:
            self._notify("terminate", node, sentence_length, "reached max length")
            return None

        if sentence_length >= stats.min_length:
            choice = weighted_random_pick(
                [
                    WeightedItem(TERMINAL, node.terminators.total),
                    WeightedItem(CONTINUE, sum(s.incidence for s in successors)),
                ],
                rng=self.rng,
                observer=self.observer,
            )
            if choice.identifier == TERMINAL:
                self._notify("terminate", node, sentence_length, "terminal draw")
                return None

        return weighted_random_pick(successors, rng=self.rng, observer=self.observer)

    def _notify(self, event, node, sentence_length, reason):
        logger.debug("Ending sentence at %r after %d words: %s", node.word, sentence_length, reason)
        if self.observer is not None:
            self.observer(event, {"word": node.word, "length": sentence_length, "reason": reason})
