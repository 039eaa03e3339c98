import logging

from .base import SentenceModel
from .sampling import weighted_random_pick
from .terminators import TerminatorTracker
from .tokens import capitalize_first, has_sentence_terminator, is_terminal_word

logger = logging.getLogger(__name__)


class TrieNode:
    """
    A word at one position of one observed sentence prefix.

    Children are keyed by word and owned by this node alone; `parent` is a
    back-reference for inspection and is never used to share nodes.
    """

    def __init__(self, word, parent=None):
        self.word = word
        self.parent = parent
        self.incidence = 1
        self.children = {}

    @property
    def identifier(self):
        return self.word

    def insert(self, token):
        """
        Find or create the child for token and return it.

        The token is lowercased unless it carries a terminator without ending
        the sentence (initials, abbreviations), which keep their case.
        """
        word = token
        if is_terminal_word(word) or not has_sentence_terminator(word):
            word = word.lower()
        child = self.children.get(word)
        if child is None:
            child = TrieNode(word, parent=self)
            self.children[word] = child
        else:
            child.incidence += 1
        return child

    def reset(self):
        stack = [self]
        while stack:
            node = stack.pop()
            stack.extend(node.children.values())
            node.children.clear()
            node.incidence = 1

    def height(self):
        height = 0
        stack = [(child, 1) for child in self.children.values()]
        while stack:
            node, level = stack.pop()
            height = max(height, level)
            stack.extend((child, level + 1) for child in node.children.values())
        return height

    def __repr__(self):
        return f"<NODE: {{Word: {self.word}, Incidence: {self.incidence}, Children: {len(self.children)}}} >"


class TransitionTrie(SentenceModel):
    """
    Sentence trie: every path from the root is an observed sentence prefix.

    Children are deduplicated within a parent (the root included), so two
    sentences that open with the same word share that first node and split
    apart further down. Terminator statistics are kept once for the whole
    tree.
    """

    def __init__(self, rng=None, observer=None):
        self.rng = rng
        self.observer = observer
        self.root = TrieNode("")
        self.terminators = TerminatorTracker()
        self.size = 0

    def add(self, tokens):
        current = self.root
        for token in tokens:
            if current is self.root:
                self.root.incidence += 1
            parent, before = current, len(current.children)
            current = parent.insert(token)
            self.size += len(parent.children) - before
            if is_terminal_word(current.word):
                self.terminators.observe(token)
                current = self.root
        logger.debug("Trie now has %d nodes", self.size)
        if logger.isEnabledFor(logging.DEBUG):
            for depth, tier in enumerate(self.top_tiers(limit=3), start=1):
                logger.debug("Tier %d: %s", depth, tier[:10])

    def generate_sentence(self):
        words = []
        node = self._next_node(self.root)
        while node is not None:
            words.append(node.word)
            node = self._next_node(node)
        if not words:
            return ""

        words[0] = capitalize_first(words[0])
        if not is_terminal_word(words[-1]):
            words[-1] += self.terminators.weighted_terminator(rng=self.rng, observer=self.observer)
        return " ".join(words)

    def reset(self):
        self.root.reset()
        self.terminators.reset()
        self.size = 0

    def describe(self):
        return (
            f"TransitionTrie(nodes={self.size}, depth={self.root.height()}, "
            f"sentence_starts={len(self.root.children)}, terminators={self.terminators.as_dict()})"
        )

    def top_tiers(self, limit=None):
        """
        Breadth-first listing of (word, incidence) pairs, one list per depth.
        """
        tiers = []
        generation = list(self.root.children.values())
        while generation and (limit is None or len(tiers) < limit):
            tiers.append([(node.word, node.incidence) for node in generation])
            generation = [child for node in generation for child in node.children.values()]
        return tiers

    def _next_node(self, node):
        if is_terminal_word(node.word) or not node.children:
            return None
        return weighted_random_pick(node.children.values(), rng=self.rng, observer=self.observer)
