"""Tunables for the Gv scorer.

Compiled-in and read-only for the lifetime of the process.  Nothing here is
derived from request state.
"""

# ---------------------------------------------------------------------------
# Positive ("value") signal weights
# ---------------------------------------------------------------------------

GV_FAVORITE_W = 1.00
GV_REPLY_W = 0.80
GV_RETWEET_W = 0.70
GV_SHARE_W = 0.90
GV_DWELL_W = 0.30
GV_QUOTE_W = 0.60
GV_FOLLOW_AUTHOR_W = 1.20

# ---------------------------------------------------------------------------
# Negative ("regret") signal weights
# ---------------------------------------------------------------------------

# Subtracted from the positive sum, so these are stored as magnitudes.
GV_NOT_INTERESTED_W = 1.50
GV_MUTE_AUTHOR_W = 2.00
GV_BLOCK_AUTHOR_W = 3.00
GV_REPORT_W = 4.00

# ---------------------------------------------------------------------------
# Shaping
# ---------------------------------------------------------------------------

# Added to (positive - negative) before squashing.  At 0.0 an empty set of
# predictions lands exactly on gv = 0.5.
GV_BIAS = 0.0

# Sigmoid steepness.
GV_SIGMOID_K = 3.0

# Lower bound of the shaped value (0–1) so no candidate is ever zeroed out.
GV_FLOOR = 0.20

# Maximum distance the multiplier may move from 1.0.
GV_STRENGTH = 0.25
