"""Scorer framework for the ranking pipeline.

Provides an abstraction for named scorers that can be run internally (as a
pipeline stage) or via an API endpoint.
"""

from .base import (
    Scorer,
    ScorerError,
    apply_scorer,
    get_scorer,
    list_scorers,
    register_scorer,
)
from .gv import GvScorer, compute_gv, gv_multiplier

# Register built-in scorers
_gv = GvScorer()
register_scorer(_gv)

__all__ = [
    "Scorer",
    "ScorerError",
    "apply_scorer",
    "get_scorer",
    "list_scorers",
    "register_scorer",
    "GvScorer",
    "compute_gv",
    "gv_multiplier",
]
