# Gambit Rating
# Copyright (C) 2025  Gambit Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# Game outcome scores
WIN_SCORE = 1.0
DRAW_SCORE = 0.5
LOSS_SCORE = 0.0

VALID_SCORES = (LOSS_SCORE, DRAW_SCORE, WIN_SCORE)

# Outcome aliases accepted on the command line
OUTCOME_ALIASES = {
    "win": WIN_SCORE,
    "w": WIN_SCORE,
    "draw": DRAW_SCORE,
    "d": DRAW_SCORE,
    "loss": LOSS_SCORE,
    "l": LOSS_SCORE,
}

# --- Elo model ---
K_FACTOR = 32
RATING_SCALE_FACTOR = 400

# Valid rating range (inclusive on both ends)
MIN_RATING = 100
MAX_RATING = 4000

# Rating category names
CATEGORY_BEGINNER = "Beginner"
CATEGORY_INTERMEDIATE = "Intermediate"
CATEGORY_ADVANCED = "Advanced"
CATEGORY_EXPERT = "Expert"
CATEGORY_MASTER = "Master"

# Lower bound (inclusive) of each category above Beginner
INTERMEDIATE_THRESHOLD = 1200
ADVANCED_THRESHOLD = 1800
EXPERT_THRESHOLD = 2200
MASTER_THRESHOLD = 2400

# Rating types (for rating history)
RATING_TYPE_FIDE_STANDARD = "fide_standard"
RATING_TYPE_FIDE_RAPID = "fide_rapid"
RATING_TYPE_FIDE_BLITZ = "fide_blitz"
RATING_TYPE_NATIONAL = "national"
RATING_TYPE_CLUB = "club"
RATING_TYPE_USCF = "uscf"
RATING_TYPE_ELO = "elo"
DEFAULT_RATING_TYPE = RATING_TYPE_ELO

# Default display names for rating types
RATING_TYPE_NAMES = {
    RATING_TYPE_FIDE_STANDARD: "FIDE Standard",
    RATING_TYPE_FIDE_RAPID: "FIDE Rapid",
    RATING_TYPE_FIDE_BLITZ: "FIDE Blitz",
    RATING_TYPE_NATIONAL: "National Rating",
    RATING_TYPE_CLUB: "Club Rating",
    RATING_TYPE_USCF: "USCF Rating",
    RATING_TYPE_ELO: "ELO Rating",
}

# Trend directions
TREND_UP = "up"
TREND_DOWN = "down"
TREND_STABLE = "stable"

# Logging
LOG_LEVEL_ENV_VAR = "GAMBIT_RATING_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
