#!/usr/bin/env python3
"""CLI entry point for the tennis game scorer.

Usage:
    python main.py score A B A A B ...   Replay points and print each score call
    python main.py game                  Simulate a game between two playstyles
    python main.py analyze               Generate analysis charts
    python main.py test                  Run all tests
"""

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def cmd_score():
    """Replay a scripted game: player names, then one winner per point."""
    from tennis.simulation import replay_points

    if len(sys.argv) < 4:
        print("Usage: python main.py score PLAYER1 PLAYER2 [WINNER ...]")
        sys.exit(1)

    player1, player2 = sys.argv[2], sys.argv[3]
    sequence = sys.argv[4:]

    try:
        calls = replay_points(player1, player2, sequence)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    print(f"  {player1} vs {player2}")
    print("  Start: Love-All")
    for i, (name, call) in enumerate(zip(sequence, calls)):
        print(f"  Point {i+1:2d}: {name:12s} -> {call}")


def cmd_game():
    """Simulate a game in text mode and print stats."""
    from tennis.players import SimPlayer, PLAYSTYLES
    from tennis.simulation import simulate_game

    print("=" * 60)
    print("  SIMULATED TENNIS GAME")
    print("=" * 60)

    # Parse optional arguments
    styles = list(PLAYSTYLES.keys())
    p1_style = sys.argv[2] if len(sys.argv) > 2 and sys.argv[2] in styles else "aggressive"
    p2_style = sys.argv[3] if len(sys.argv) > 3 and sys.argv[3] in styles else "defensive"

    p1 = SimPlayer("Server", p1_style)
    p2 = SimPlayer("Receiver", p2_style)

    print(f"\n  {p1.name}: {p1.label} (skl:{p1.skill:.0%} con:{p1.consistency:.0%} srv:{p1.serve:.0%})")
    print(f"  {p2.name}: {p2.label} (skl:{p2.skill:.0%} con:{p2.consistency:.0%} srv:{p2.serve:.0%})")
    print()

    result = simulate_game(p1, p2)
    s = result.stats

    for point in result.points:
        print(f"  Point {point.point_number:2d}: {point.winner:8s} wins  "
              f"[{point.player1_score}-{point.player2_score}]  {point.score}")

    print()
    print(f"  FINAL CALL: {result.final_score}")
    print(f"  WINNER: {result.winner or 'none (point limit reached)'}")
    print()
    print(f"  Total points: {s['total_points']}")
    print(f"  Deuces: {s['deuces']}  |  Advantages: {s['advantages']}")
    print(f"  Longest run: {s['longest_run']} points")
    print()
    print("  Available styles: " + ", ".join(styles))
    print("  Usage: python main.py game [server_style] [receiver_style]")
    print("=" * 60)


def cmd_analyze():
    """Generate all analysis charts."""
    print("Generating analysis charts...")
    print("-" * 60)
    from sim.analysis import generate_all_charts
    output_dir = os.path.join(os.path.dirname(__file__), "output")
    paths = generate_all_charts(output_dir=output_dir)
    print(f"\nDone! {len(paths)} charts saved to {output_dir}/")


def cmd_test():
    """Run all tests."""
    import subprocess
    print("Running tests...")
    print("-" * 60)
    result = subprocess.run(
        [sys.executable, "-m", "pytest", "tests/", "-v"],
        cwd=os.path.dirname(os.path.abspath(__file__)),
    )
    sys.exit(result.returncode)


COMMANDS = {
    "score": cmd_score,
    "game": cmd_game,
    "analyze": cmd_analyze,
    "test": cmd_test,
}


def main():
    if len(sys.argv) < 2 or sys.argv[1] not in COMMANDS:
        print(__doc__)
        print("Available commands:")
        for name, func in COMMANDS.items():
            print(f"  {name:12s} {func.__doc__}")
        sys.exit(1)

    COMMANDS[sys.argv[1]]()


if __name__ == "__main__":
    main()
