"""Result types for simulated tennis games."""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class PointResult:
    """One point of a simulated game."""
    point_number: int     # 1-based
    server: str           # name of the serving player
    winner: str           # name of the player who won the point
    winner_player: int    # 1 or 2, position of the point winner in the game
    score: str            # score call after the point
    player1_score: int
    player2_score: int


@dataclass
class GameResult:
    """Full simulated game with every point played."""
    player1_name: str
    player2_name: str
    points: list          # list[PointResult]
    final_score: str
    winner: Optional[str] = None  # None if the game hit the point limit
    stats: dict = field(default_factory=dict)

    @property
    def total_points(self) -> int:
        return len(self.points)
