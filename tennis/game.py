"""Tennis game scoring — two players, two point counters, one score call.

Scoring rules, evaluated in order:
- Equal scores: Love-All, Fifteen-All, Thirty-All, then Deuce from 3-3 on
- Either player on 4+ points: Advantage (lead of 1) or Win for (lead of 2+)
- Otherwise: "<player 1 name>-<player 2 name>", e.g. Thirty-Fifteen

The game never locks after a win. Points keep counting and the score call
keeps following the same rules.
"""

from typing import Optional

from tennis.rules import (
    DEUCE_CALL,
    EQUAL_SCORE_CALLS,
    GAME_POINT_THRESHOLD,
    SCORE_NAMES,
    WIN_MARGIN,
)


class ScoringError(ValueError):
    """Base class for invalid arguments passed to or reached by a game."""


class InvalidPlayerError(ScoringError):
    """A point was recorded for a name that is not in the game."""

    def __init__(self, player_name: str):
        self.player_name = player_name
        super().__init__(f'Player with the name "{player_name}" does not play in this match.')


class InvalidScoreError(ScoringError):
    """A point counter has no spoken name (only 0-3 do)."""

    def __init__(self, score: int):
        self.score = score
        super().__init__(f"Invalid score: {score}")


class TennisGame:
    """A single game of tennis between two named players."""

    def __init__(self, player1_name: str, player2_name: str):
        self._player1_name = player1_name
        self._player2_name = player2_name
        self.player1_score = 0
        self.player2_score = 0

    @property
    def player1_name(self) -> str:
        return self._player1_name

    @property
    def player2_name(self) -> str:
        return self._player2_name

    def won_point(self, player_name: str) -> None:
        """Record one point for the named player.

        Names are matched exactly, player 1 first. If both players share a
        name, the point always goes to player 1.

        Raises:
            InvalidPlayerError: the name matches neither player. Scores are
                left untouched.
        """
        if player_name == self._player1_name:
            self.player1_score += 1
        elif player_name == self._player2_name:
            self.player2_score += 1
        else:
            raise InvalidPlayerError(player_name)

    def get_score(self) -> str:
        """Current score call, e.g. "Fifteen-Love", "Deuce", "Advantage A"."""
        if self.player1_score == self.player2_score:
            return self._equal_score()

        if self.player1_score >= GAME_POINT_THRESHOLD or self.player2_score >= GAME_POINT_THRESHOLD:
            return self._advantage_or_win()

        return f"{score_name(self.player1_score)}-{score_name(self.player2_score)}"

    def _equal_score(self) -> str:
        return EQUAL_SCORE_CALLS.get(self.player1_score, DEUCE_CALL)

    def _advantage_or_win(self) -> str:
        diff = self.player1_score - self.player2_score
        if diff == 1:
            return f"Advantage {self._player1_name}"
        if diff == -1:
            return f"Advantage {self._player2_name}"
        if diff >= WIN_MARGIN:
            return f"Win for {self._player1_name}"
        return f"Win for {self._player2_name}"

    @property
    def winner(self) -> Optional[str]:
        """Name of the player who has won the game, or None if still live."""
        diff = self.player1_score - self.player2_score
        if self.player1_score >= GAME_POINT_THRESHOLD and diff >= WIN_MARGIN:
            return self._player1_name
        if self.player2_score >= GAME_POINT_THRESHOLD and -diff >= WIN_MARGIN:
            return self._player2_name
        return None

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    @property
    def points_played(self) -> int:
        return self.player1_score + self.player2_score

    def __repr__(self) -> str:
        return (
            f"TennisGame({self._player1_name!r} {self.player1_score}"
            f" - {self.player2_score} {self._player2_name!r})"
        )


def score_name(score: int) -> str:
    """Spoken name of a point counter during normal play (0-3)."""
    try:
        return SCORE_NAMES[score]
    except KeyError:
        raise InvalidScoreError(score) from None
