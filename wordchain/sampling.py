"""
Weighted random selection over items carrying an integer incidence.

Anything with `identifier` and `incidence` attributes can be sampled: the
WeightedItem below, graph nodes and trie nodes all qualify.
"""
import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Sequence

logger = logging.getLogger(__name__)

Observer = Callable[[str, dict], None]


@dataclass(frozen=True)
class WeightedItem:
    identifier: str
    incidence: int = field(default=0, compare=False)

    def __post_init__(self):
        if self.incidence < 0:
            raise ValueError(
                f"incidence must be non-negative, got {self.incidence} for {self.identifier!r}"
            )


@dataclass(frozen=True)
class ProbabilityMetadata:
    sorted_items: Sequence
    total_incidence: int
    max_incidence: int
    min_incidence: int
    max_likelihood: float
    min_likelihood: float

    def __str__(self):
        incidences = [item.incidence for item in self.sorted_items[:10]]
        if len(self.sorted_items) > 10:
            incidences = f"{str(incidences)[:-1]}, ...]"
        return (
            f"{{METADATA: total={self.total_incidence} "
            f"max_incidence={self.max_incidence} max_likelihood={self.max_likelihood:.6f} "
            f"min_incidence={self.min_incidence} min_likelihood={self.min_likelihood:.6f} "
            f"items={len(self.sorted_items)} sorted_incidences={incidences}}}"
        )


def sorted_by_incidence(items: Iterable, descending: bool = False) -> list:
    """
    Sort by incidence, breaking ties by identifier so that the order (and so
    the draw for a given random value) is reproducible.
    """
    return sorted(items, key=lambda item: (item.incidence, item.identifier), reverse=descending)


def probability_metadata(items: Iterable) -> ProbabilityMetadata:
    """
    Computed fresh on every call; nothing is cached, so changes to the
    underlying items always show up in the next draw.
    """
    ordered = sorted_by_incidence(items)
    total = sum(item.incidence for item in ordered)
    min_incidence = ordered[0].incidence if ordered else 0
    max_incidence = ordered[-1].incidence if ordered else 0
    if total == 0:
        min_likelihood = max_likelihood = 0.0
    else:
        min_likelihood = min_incidence / total
        max_likelihood = max_incidence / total
    return ProbabilityMetadata(
        sorted_items=ordered,
        total_incidence=total,
        max_incidence=max_incidence,
        min_incidence=min_incidence,
        max_likelihood=max_likelihood,
        min_likelihood=min_likelihood,
    )


def weighted_random_pick(items: Iterable, rng=None, observer: Optional[Observer] = None):
    """
    Draw one item, biased by incidence.

    The random value is drawn from [0, max_likelihood] rather than [0, 1], and
    the ascending-sorted items are walked until the cumulative likelihood
    reaches it. Squeezing the range this way keeps the smaller items in play
    against a single dominant one. When nothing qualifies the last (largest)
    item wins.

    Args:
        items: iterable of weighted items.
        rng: object with a uniform(a, b) method; defaults to the random module.
        observer: optional callable(event, payload) for tracing the draw.
    Returns:
        The chosen item, or None if items is empty.
    """
    items = list(items)
    if not items:
        return None
    if len(items) == 1:
        return items[0]

    metadata = probability_metadata(items)
    if metadata.total_incidence == 0:
        winner = metadata.sorted_items[-1]
        if observer is not None:
            observer("default_to_last", {"item": winner, "reason": "zero total"})
        return winner

    rng = rng or random
    random_likelihood = rng.uniform(0, metadata.max_likelihood)

    cumulative = 0.0
    for item in metadata.sorted_items:
        overall = item.incidence / metadata.total_incidence
        cumulative += overall
        if observer is not None:
            observer("likelihood", {
                "overall": overall,
                "cumulative": cumulative,
                "random": random_likelihood,
            })
        if random_likelihood <= cumulative:
            if observer is not None:
                observer("selected", {
                    "metadata": metadata,
                    "random": random_likelihood,
                    "winning_likelihood": cumulative,
                    "item": item,
                })
            return item

    winner = metadata.sorted_items[-1]
    if observer is not None:
        observer("default_to_last", {"item": winner, "reason": "no cumulative match"})
    return winner


def logging_observer(event: str, payload: dict) -> None:
    """Forward sampling events to this module's logger at DEBUG."""
    if not logger.isEnabledFor(logging.DEBUG):
        return
    if event == "likelihood":
        logger.debug(
            "random requirement=%.6f overall=%.6f cumulative=%.6f",
            payload["random"], payload["overall"], payload["cumulative"],
        )
    elif event == "selected":
        logger.debug(
            "%s random=%.6f winning likelihood=%.6f winner=%r",
            payload["metadata"], payload["random"],
            payload["winning_likelihood"], payload["item"],
        )
    else:
        logger.debug("%s: %r", event, payload)
