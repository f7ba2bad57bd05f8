"""Gv scorer.

Adjusts the ``weighted_score`` set by earlier stages with a bounded
"survivability / regret" signal derived from the Phoenix predictions:

* **Value** signals (favorite, reply, retweet, share, dwell, quote,
  follow-author) add to a raw score.
* **Regret** signals (not-interested, mute, block, report) subtract.
* The raw score is squashed through a sigmoid into Gv in (0, 1).
* Gv is shaped into a multiplier around 1.0.  ``GV_FLOOR`` keeps
  exploration alive and ``GV_STRENGTH`` bounds how far rank can move.

Tunables live in :mod:`.params`.
"""

import logging
import math

from ...models import PhoenixScores, PostCandidate, ScoreDelta, ScoredPostsQuery
from . import params as p
from .base import Scorer

logger = logging.getLogger(__name__)


def _get(x: float | None) -> float:
    """Absent predictions contribute nothing."""
    return 0.0 if x is None else x


def _sigmoid(z: float) -> float:
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    # Same value, rearranged so exp() cannot overflow for very negative z
    e = math.exp(z)
    return e / (1.0 + e)


def compute_gv(s: PhoenixScores) -> float:
    """Gv in (0, 1) derived from Phoenix predictions.

    Validated scores are bounded to [0, 1]; unvalidated values large enough to
    overflow both weighted sums to ``inf`` yield NaN.
    """
    pos = (
        _get(s.favorite_score) * p.GV_FAVORITE_W
        + _get(s.reply_score) * p.GV_REPLY_W
        + _get(s.retweet_score) * p.GV_RETWEET_W
        + _get(s.share_score) * p.GV_SHARE_W
        + _get(s.dwell_score) * p.GV_DWELL_W
        + _get(s.quote_score) * p.GV_QUOTE_W
        + _get(s.follow_author_score) * p.GV_FOLLOW_AUTHOR_W
    )

    neg = (
        _get(s.not_interested_score) * p.GV_NOT_INTERESTED_W
        + _get(s.mute_author_score) * p.GV_MUTE_AUTHOR_W
        + _get(s.block_author_score) * p.GV_BLOCK_AUTHOR_W
        + _get(s.report_score) * p.GV_REPORT_W
    )

    raw = (pos - neg) + p.GV_BIAS
    return _sigmoid(p.GV_SIGMOID_K * raw)


def gv_multiplier(gv: float) -> float:
    """Convert Gv into a multiplicative factor for ``weighted_score``.

    Out-of-range input is clamped to [0, 1].  The result lies in
    ``[1 + GV_STRENGTH * (GV_FLOOR - 0.5) * 2, 1 + GV_STRENGTH]``.
    """
    gv = min(max(gv, 0.0), 1.0)
    shaped = p.GV_FLOOR + (1.0 - p.GV_FLOOR) * gv  # still 0..1
    return 1.0 + p.GV_STRENGTH * (shaped - 0.5) * 2.0  # [0,1] -> [-1,1], then scaled


class GvScorer(Scorer):
    """Multiplies each candidate's ``weighted_score`` by its Gv multiplier.

    Must run after the stage that sets ``weighted_score``; a missing score is
    treated as 0.0 and stays 0.0.
    """

    @property
    def name(self) -> str:
        return "gv"

    async def score(
        self,
        query: ScoredPostsQuery,
        candidates: list[PostCandidate],
    ) -> list[ScoreDelta]:
        logger.debug("Gv scoring %d candidates", len(candidates))

        scored: list[ScoreDelta] = []
        for c in candidates:
            base = _get(c.weighted_score)
            mult = gv_multiplier(compute_gv(c.phoenix_scores))
            scored.append(ScoreDelta(weighted_score=base * mult))
        return scored

    def update(self, candidate: PostCandidate, scored: ScoreDelta) -> None:
        candidate.weighted_score = scored.weighted_score
