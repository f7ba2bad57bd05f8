"""Tests for the scorers router."""

import os

import pytest
from fastapi.testclient import TestClient

from ..main import app
from ..models import ScoreDelta
from ..lib.scorers import Scorer, register_scorer
from ..lib.scorers import base


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def api_key_env():
    """Set a known API key for every test, then restore the previous value."""
    prev = os.environ.get("API_KEY")
    os.environ["API_KEY"] = "testkey"
    yield
    if prev is None:
        del os.environ["API_KEY"]
    else:
        os.environ["API_KEY"] = prev


@pytest.fixture
def broken_scorer():
    """Register a scorer that returns too few results, then unregister it."""

    class ShortScorer(Scorer):
        @property
        def name(self) -> str:
            return "short"

        async def score(self, query, candidates):
            return [ScoreDelta(weighted_score=1.0)]

        def update(self, candidate, scored):
            candidate.weighted_score = scored.weighted_score

    register_scorer(ShortScorer())
    yield
    base._scorers.pop("short", None)


HEADERS = {"X-API-Key": "testkey"}
QUERY = {"user_did": "did:plc:viewer"}


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

def test_list_scorers():
    client = TestClient(app, headers=HEADERS)
    resp = client.get("/scorers")
    assert resp.status_code == 200
    assert "gv" in resp.json()["scorers"]


def test_score_gv():
    client = TestClient(app, headers=HEADERS)
    resp = client.post(
        "/scorers/score",
        json={
            "scorers": ["gv"],
            "query": QUERY,
            "candidates": [
                {
                    "at_uri": "at://post/1",
                    "content": "liked a lot",
                    "weighted_score": 2.0,
                    "phoenix_scores": {"favorite_score": 1.0},
                },
                {"at_uri": "at://post/2", "weighted_score": 5.0},
                {"at_uri": "at://post/3"},
            ],
        },
    )
    assert resp.status_code == 200
    data = resp.json()["candidates"]
    assert [c["at_uri"] for c in data] == ["at://post/1", "at://post/2", "at://post/3"]
    assert data[0]["weighted_score"] == pytest.approx(2.462, abs=1e-3)
    assert data[0]["content"] == "liked a lot"
    assert data[0]["phoenix_scores"]["favorite_score"] == 1.0
    assert data[1]["weighted_score"] == pytest.approx(5.25)
    assert data[2]["weighted_score"] == 0.0


def test_score_empty_batch():
    client = TestClient(app, headers=HEADERS)
    resp = client.post("/scorers/score", json={"scorers": ["gv"], "query": QUERY})
    assert resp.status_code == 200
    assert resp.json() == {"candidates": []}


def test_score_unknown_scorer_returns_404():
    client = TestClient(app, headers=HEADERS)
    resp = client.post(
        "/scorers/score",
        json={"scorers": ["gv", "nonexistent"], "query": QUERY, "candidates": []},
    )
    assert resp.status_code == 404
    assert resp.json() == {"detail": "Unknown scorer: nonexistent"}


def test_score_failing_scorer_returns_502(broken_scorer):
    client = TestClient(app, headers=HEADERS)
    resp = client.post(
        "/scorers/score",
        json={
            "scorers": ["short"],
            "query": QUERY,
            "candidates": [{"at_uri": "at://1"}, {"at_uri": "at://2"}],
        },
    )
    assert resp.status_code == 502
    assert resp.json() == {"detail": "Scorer 'short' failed"}


def test_score_out_of_range_probability_returns_422():
    client = TestClient(app, headers=HEADERS)
    resp = client.post(
        "/scorers/score",
        json={
            "scorers": ["gv"],
            "query": QUERY,
            "candidates": [{"at_uri": "at://1", "phoenix_scores": {"report_score": 1.5}}],
        },
    )
    assert resp.status_code == 422


def test_score_no_scorers_returns_422():
    client = TestClient(app, headers=HEADERS)
    resp = client.post("/scorers/score", json={"scorers": [], "query": QUERY})
    assert resp.status_code == 422


def test_score_requires_auth():
    client = TestClient(app)
    resp = client.post("/scorers/score", json={"scorers": ["gv"], "query": QUERY})
    assert resp.status_code == 401
