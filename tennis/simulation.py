"""Game simulation — drive a TennisGame point by point.

Two ways to feed a game:
- simulate_game: SimPlayers play random points until someone wins
- replay_points: a scripted list of point winners, one name per point
"""

from tennis.game import TennisGame
from tennis.players import SimPlayer
from tennis.rules import DEUCE_CALL, EQUAL_SCORE_CALLS, LOVE
from tennis.types import GameResult, PointResult

MAX_POINTS = 200  # safety limit on a single simulated game


def simulate_point(game: TennisGame, server: SimPlayer, receiver: SimPlayer) -> PointResult:
    """Play one point and record it in the game.

    The point is attributed to whichever counter the game moved, so a game
    whose players share a name still reports player 1 as the winner.
    """
    if server.wins_point(receiver, serving=True):
        winner = server.name
    else:
        winner = receiver.name

    before = game.player1_score
    game.won_point(winner)
    winner_player = 1 if game.player1_score > before else 2

    return PointResult(
        point_number=game.points_played,
        server=server.name,
        winner=game.player1_name if winner_player == 1 else game.player2_name,
        winner_player=winner_player,
        score=game.get_score(),
        player1_score=game.player1_score,
        player2_score=game.player2_score,
    )


def simulate_game(
    p1: SimPlayer,
    p2: SimPlayer,
    max_points: int = MAX_POINTS,
) -> GameResult:
    """Simulate one game with p1 serving throughout.

    Stops as soon as the game has a winner, or after max_points points
    (the result then has no winner).

    Returns GameResult with every point and the per-game stats.
    """
    if max_points < 1:
        raise ValueError(f"max_points must be at least 1, got {max_points}")
    if p1.name == p2.name:
        raise ValueError(f"players need distinct names, both are called \"{p1.name}\"")

    game = TennisGame(p1.name, p2.name)
    points: list[PointResult] = []

    while game.winner is None and len(points) < max_points:
        points.append(simulate_point(game, server=p1, receiver=p2))

    return GameResult(
        player1_name=p1.name,
        player2_name=p2.name,
        points=points,
        final_score=game.get_score(),
        winner=game.winner,
        stats=compute_game_stats(points, p1, p2),
    )


def replay_points(player1_name: str, player2_name: str, sequence) -> list[str]:
    """Score calls after each point of a scripted game.

    Args:
        player1_name: First player.
        player2_name: Second player.
        sequence: Iterable of point winners, one name per point.

    Raises:
        InvalidPlayerError: a name in the sequence is not in the game.
    """
    game = TennisGame(player1_name, player2_name)
    calls = []
    for name in sequence:
        game.won_point(name)
        calls.append(game.get_score())
    return calls


def compute_game_stats(points: list[PointResult], p1: SimPlayer, p2: SimPlayer) -> dict:
    """Compute game statistics."""
    p1_points = sum(1 for p in points if p.winner_player == 1)
    p2_points = sum(1 for p in points if p.winner_player == 2)

    deuces = sum(1 for p in points if p.score == DEUCE_CALL)
    advantages = sum(1 for p in points if p.score.startswith("Advantage "))

    longest_run = 0
    run = 0
    previous = None
    for p in points:
        run = run + 1 if p.winner_player == previous else 1
        previous = p.winner_player
        longest_run = max(longest_run, run)

    return {
        "p1_points": p1_points,
        "p2_points": p2_points,
        "total_points": len(points),
        "deuces": deuces,
        "advantages": advantages,
        "longest_run": longest_run,
        "final_score": points[-1].score if points else EQUAL_SCORE_CALLS[LOVE],
        "p1_name": p1.name,
        "p2_name": p2.name,
        "p1_style": p1.label,
        "p2_style": p2.label,
    }
