"""Traditional tennis scoring vocabulary and game thresholds.

Point counters are plain integers; the named tiers below are the values
that get a spoken name during normal play.
"""

# Score tiers
LOVE = 0
FIFTEEN = 1
THIRTY = 2
FORTY = 3

SCORE_NAMES = {
    LOVE: "Love",
    FIFTEEN: "Fifteen",
    THIRTY: "Thirty",
    FORTY: "Forty",
}

# Equal scores below FORTY are called "<name>-All", from FORTY up it's deuce
DEUCE_CALL = "Deuce"
EQUAL_SCORE_CALLS = {
    LOVE: f"{SCORE_NAMES[LOVE]}-All",
    FIFTEEN: f"{SCORE_NAMES[FIFTEEN]}-All",
    THIRTY: f"{SCORE_NAMES[THIRTY]}-All",
}

# Endgame
GAME_POINT_THRESHOLD = 4  # either player on 4+ points -> advantage / win calls
WIN_MARGIN = 2  # must lead by 2 to take the game
