from .sampling import WeightedItem, weighted_random_pick
from .tokens import EXCLAMATION, PERIOD, QUESTION, sentence_terminator


class TerminatorTracker:
    """
    Counts how many observed sentences ended in ".", "?" and "!", and picks a
    terminator in proportion to those counts.
    """

    def __init__(self):
        self.period = 0
        self.question = 0
        self.exclamation = 0

    @property
    def total(self):
        return self.period + self.question + self.exclamation

    def observe(self, token):
        terminator = sentence_terminator(token)
        if terminator == PERIOD:
            self.period += 1
        elif terminator == QUESTION:
            self.question += 1
        elif terminator == EXCLAMATION:
            self.exclamation += 1

    def weighted_terminator(self, rng=None, observer=None):
        if self.total == 0:
            return PERIOD
        incidences = [
            WeightedItem(PERIOD, self.period),
            WeightedItem(QUESTION, self.question),
            WeightedItem(EXCLAMATION, self.exclamation),
        ]
        winner = weighted_random_pick(incidences, rng=rng, observer=observer)
        return winner.identifier if winner is not None else PERIOD

    def reset(self):
        self.period = 0
        self.question = 0
        self.exclamation = 0

    def as_dict(self):
        return {PERIOD: self.period, QUESTION: self.question, EXCLAMATION: self.exclamation}

    def __repr__(self):
        return (
            f"TerminatorTracker(period={self.period}, question={self.question}, "
            f"exclamation={self.exclamation})"
        )
