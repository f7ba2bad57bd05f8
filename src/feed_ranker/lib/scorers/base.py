"""Base abstraction for ranking scorers.

A scorer is one stage of the ranking pipeline.  It receives the whole batch
of candidates, returns one sparse :class:`ScoreDelta` per candidate, and
knows how to merge its own delta back into the live candidate via
``update``.  Scorers are registered in a global registry so they can be looked
up by name from the API layer or chained by a host pipeline.
"""

import logging
from abc import ABC, abstractmethod

from ...models import PostCandidate, ScoreDelta, ScoredPostsQuery

logger = logging.getLogger(__name__)


class ScorerError(Exception):
    """A scorer could not produce a result for the batch."""


# ---------------------------------------------------------------------------
# Abstract base
# ---------------------------------------------------------------------------

class Scorer(ABC):
    """Abstract base class for named scorers.

    Subclasses must implement `name` (property), `score` and `update`.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique name identifying this scorer (e.g. ``gv``)."""
        ...

    @abstractmethod
    async def score(
        self,
        query: ScoredPostsQuery,
        candidates: list[PostCandidate],
    ) -> list[ScoreDelta]:
        """Score a batch of candidates.

        Parameters
        ----------
        query:
            The request context.
        candidates:
            The batch to score.  Must not be mutated.

        Returns
        -------
        list[ScoreDelta]
            One delta per candidate, in the same order.

        Raises
        ------
        ScorerError
            If no result can be produced for the batch.
        """
        ...

    @abstractmethod
    def update(self, candidate: PostCandidate, scored: ScoreDelta) -> None:
        """Merge *scored* into *candidate*, touching only the fields this scorer owns."""
        ...


# ---------------------------------------------------------------------------
# Host-side application
# ---------------------------------------------------------------------------

async def apply_scorer(
    scorer: Scorer,
    query: ScoredPostsQuery,
    candidates: list[PostCandidate],
) -> list[PostCandidate]:
    """Run *scorer* over *candidates* and merge the results in place.

    Returns the same list object for chaining.
    """
    scored = await scorer.score(query, candidates)

    if len(scored) != len(candidates):
        raise ScorerError(
            f"Scorer '{scorer.name}' returned {len(scored)} results "
            f"for {len(candidates)} candidates"
        )

    for candidate, delta in zip(candidates, scored):
        scorer.update(candidate, delta)

    logger.debug("Applied scorer '%s' to %d candidates", scorer.name, len(candidates))
    return candidates


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------

_scorers: dict[str, Scorer] = {}


def register_scorer(scorer: Scorer) -> None:
    """Register a scorer instance by its name."""
    _scorers[scorer.name] = scorer


def get_scorer(name: str) -> Scorer | None:
    """Look up a registered scorer by name.  Returns ``None`` if not found."""
    return _scorers.get(name)


def list_scorers() -> list[str]:
    """Return the names of all registered scorers."""
    return list(_scorers.keys())
