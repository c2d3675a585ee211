"""Simulated players — playstyle presets that decide who wins each point.

A point is a single weighted coin flip. The server's chance of winning it
starts at the serve advantage and moves with the skill and consistency gap
between the two players.
"""

import random


# Player playstyle presets
PLAYSTYLES = {
    "aggressive": {
        "label": "Aggressive",
        "skill": 0.80,
        "consistency": 0.65,
        "serve": 0.85,
    },
    "defensive": {
        "label": "Defensive",
        "skill": 0.75,
        "consistency": 0.90,
        "serve": 0.60,
    },
    "allround": {
        "label": "All-Round",
        "skill": 0.78,
        "consistency": 0.78,
        "serve": 0.72,
    },
    "beginner": {
        "label": "Beginner",
        "skill": 0.45,
        "consistency": 0.40,
        "serve": 0.35,
    },
    "pro": {
        "label": "Professional",
        "skill": 0.95,
        "consistency": 0.92,
        "serve": 0.92,
    },
}

BASE_SERVE_WIN = 0.55  # even players: server takes ~55% of points
SERVE_WEIGHT = 0.20
SKILL_WEIGHT = 0.60
CONSISTENCY_WEIGHT = 0.25
MIN_WIN_PROB = 0.05
MAX_WIN_PROB = 0.95


class SimPlayer:
    """A simulated tennis player."""

    def __init__(self, name: str, playstyle: str):
        """Create a player.

        Args:
            name: Name used to record points in a TennisGame.
            playstyle: Key from PLAYSTYLES.
        """
        self.name = name
        preset = PLAYSTYLES[playstyle]
        self.playstyle = playstyle
        self.label = preset["label"]
        self.skill = preset["skill"]
        self.consistency = preset["consistency"]
        self.serve = preset["serve"]

    def wins_point(self, opponent: "SimPlayer", serving: bool) -> bool:
        """Whether this player wins the next point against the opponent."""
        if serving:
            prob = point_win_probability(self, opponent)
        else:
            prob = 1.0 - point_win_probability(opponent, self)
        return random.random() < prob

    def __repr__(self) -> str:
        return f"SimPlayer({self.name!r}, {self.playstyle!r})"


def point_win_probability(server: SimPlayer, receiver: SimPlayer) -> float:
    """Probability that the server wins a single point."""
    prob = BASE_SERVE_WIN
    prob += (server.serve - 0.5) * SERVE_WEIGHT
    prob += (server.skill - receiver.skill) * SKILL_WEIGHT
    prob += (server.consistency - receiver.consistency) * CONSISTENCY_WEIGHT
    return max(MIN_WIN_PROB, min(MAX_WIN_PROB, prob))
