from abc import ABC, abstractmethod


class SentenceModel(ABC):
    """
    Contract shared by the transition graph and the transition trie.

    Implementations are not thread-safe; callers serialize access.
    """

    @abstractmethod
    def add(self, tokens):
        """
        tokens: list[str], whitespace-split words with punctuation attached.
        """

    @abstractmethod
    def generate_sentence(self) -> str:
        """
        Returns one generated sentence, or "" if nothing has been learned.
        """

    @abstractmethod
    def reset(self):
        """
        Drop all learned state.
        """

    @abstractmethod
    def describe(self) -> str:
        """
        Human-readable summary for logging only.
        """
