from pydantic import BaseModel, ConfigDict, Field


class PhoenixScores(BaseModel):
    """Predicted engagement / regret probabilities for a single post.

    Produced upstream by the Phoenix model and never modified afterwards.
    Unset fields mean the model made no prediction for that action.
    """

    model_config = ConfigDict(frozen=True)

    # Positive signals
    favorite_score: float | None = Field(None, ge=0.0, le=1.0)
    reply_score: float | None = Field(None, ge=0.0, le=1.0)
    retweet_score: float | None = Field(None, ge=0.0, le=1.0)
    share_score: float | None = Field(None, ge=0.0, le=1.0)
    dwell_score: float | None = Field(None, ge=0.0, le=1.0)
    quote_score: float | None = Field(None, ge=0.0, le=1.0)
    follow_author_score: float | None = Field(None, ge=0.0, le=1.0)

    # Negative signals
    not_interested_score: float | None = Field(None, ge=0.0, le=1.0)
    mute_author_score: float | None = Field(None, ge=0.0, le=1.0)
    block_author_score: float | None = Field(None, ge=0.0, le=1.0)
    report_score: float | None = Field(None, ge=0.0, le=1.0)


class PostCandidate(BaseModel):
    """A rankable post as held by the ranking pipeline."""

    at_uri: str | None = Field(
        None, description="The AT URI of the post (e.g. at://...)")
    author_did: str | None = Field(None, description="DID of the post author")
    content: str | None = Field(None, description="The post text content")
    generator_name: str | None = Field(
        None, description="Candidate generator that produced this post"
    )
    score: float | None = Field(
        None, description="Retrieval score assigned by the candidate generator"
    )
    phoenix_scores: PhoenixScores = Field(
        default_factory=PhoenixScores,
        description="Predicted engagement probabilities",
    )
    weighted_score: float | None = Field(
        None, description="Ranking score accumulated by the scorer stages"
    )


class ScoreDelta(BaseModel):
    """Sparse scorer output: only the fields a scorer is allowed to change."""

    model_config = ConfigDict(frozen=True)

    weighted_score: float | None = None


class ScoredPostsQuery(BaseModel):
    """Request context passed to every scorer."""

    user_did: str = Field(..., description="AT Protocol DID of the viewing user")
    request_id: str | None = Field(None, description="Opaque request identifier")
