"""Scorers router – exposes ranking scorers via HTTP.

GET /scorers
    List available scorers.

POST /scorers/score
    Run one or more named scorers, in order, over a batch of candidates.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ..models import PostCandidate, ScoredPostsQuery
from ..lib.scorers import apply_scorer, get_scorer, list_scorers
from ..security import verify_api_key

router = APIRouter(tags=["scorers"], dependencies=[Depends(verify_api_key)])

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request / Response models
# ---------------------------------------------------------------------------

class ScoreRequest(BaseModel):
    """Request body for the score endpoint."""

    scorers: list[str] = Field(
        ...,
        min_length=1,
        description="Scorer names, applied in the given order",
    )
    query: ScoredPostsQuery
    candidates: list[PostCandidate] = Field(default_factory=list)


class ScoreResponse(BaseModel):
    """Response body returning the candidates with updated scores."""

    candidates: list[PostCandidate]


class ScorerListResponse(BaseModel):
    """Lists available scorer names."""

    scorers: list[str]


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get("/scorers", response_model=ScorerListResponse)
async def scorers_list() -> ScorerListResponse:
    """Return the names of all registered scorers."""
    return ScorerListResponse(scorers=list_scorers())


@router.post("/scorers/score", response_model=ScoreResponse)
async def scorers_score(payload: ScoreRequest) -> ScoreResponse:
    """Run the named scorers over the candidates and return them.

    Candidate order is preserved; scorers only adjust scores.  Unknown
    scorer names are rejected before any scorer runs.
    """
    scorers = []
    for name in payload.scorers:
        scorer = get_scorer(name)
        if scorer is None:
            raise HTTPException(status_code=404, detail=f"Unknown scorer: {name}")
        scorers.append(scorer)

    candidates = payload.candidates
    for scorer in scorers:
        try:
            candidates = await apply_scorer(scorer, payload.query, candidates)
        except Exception as exc:
            logger.exception("Scorer '%s' failed", scorer.name)
            raise HTTPException(
                status_code=502,
                detail=f"Scorer '{scorer.name}' failed",
            ) from exc

    return ScoreResponse(candidates=candidates)
