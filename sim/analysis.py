"""Matplotlib analysis charts — game length, playstyle matchups, score calls."""

import os
import random

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend
import matplotlib.pyplot as plt
import numpy as np

from tennis.players import SimPlayer, PLAYSTYLES
from tennis.simulation import simulate_game


def _style_chart(ax, title):
    """Apply dark theme styling to chart."""
    ax.set_facecolor("#0f0f1a")
    ax.set_title(title, color="#e0e0e0", fontsize=13, fontweight="bold", pad=12)
    ax.tick_params(colors="#888888", labelsize=9)
    ax.spines["top"].set_visible(False)
    ax.spines["right"].set_visible(False)
    ax.spines["bottom"].set_color("#333333")
    ax.spines["left"].set_color("#333333")
    ax.xaxis.label.set_color("#aaaaaa")
    ax.yaxis.label.set_color("#aaaaaa")


def _check_n_games(n_games):
    if n_games < 1:
        raise ValueError(f"n_games must be at least 1, got {n_games}")


def _save(fig, save_path):
    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, facecolor=fig.get_facecolor())
    return fig


def chart_points_per_game(n_games=50, save_path=None):
    """Chart 1: Game Length Distribution.

    Histogram of points played per game for a few matchups. Even matchups
    go to deuce more often and run longer.
    """
    _check_n_games(n_games)
    matchups = [
        ("allround", "allround", "#28a745"),
        ("aggressive", "defensive", "#e94560"),
        ("pro", "beginner", "#ffc107"),
    ]

    fig, ax = plt.subplots(figsize=(8, 5))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Points per Game by Matchup")

    for s1, s2, color in matchups:
        lengths = []
        for seed in range(n_games):
            random.seed(seed * 50)
            result = simulate_game(SimPlayer("P1", s1), SimPlayer("P2", s2))
            lengths.append(result.total_points)

        label = f"{PLAYSTYLES[s1]['label']} vs {PLAYSTYLES[s2]['label']}"
        bins = range(4, max(lengths) + 2) if lengths else range(4, 12)
        ax.hist(lengths, bins=bins, alpha=0.6, color=color, label=label, edgecolor=color)

    ax.set_xlabel("Points Played")
    ax.set_ylabel("Games")
    ax.legend(facecolor="#1a1a2e", edgecolor="#333", labelcolor="#e0e0e0", fontsize=9)
    ax.grid(True, alpha=0.15, axis="y")

    return _save(fig, save_path)


def chart_matchup_heatmap(n_games=20, save_path=None):
    """Chart 2: Playstyle Matchup Heatmap.

    Grid showing how often the serving playstyle (rows) holds serve
    against every receiving playstyle (columns).
    """
    _check_n_games(n_games)
    style_keys = list(PLAYSTYLES.keys())
    n = len(style_keys)
    win_matrix = np.zeros((n, n))

    for i, s1 in enumerate(style_keys):
        for j, s2 in enumerate(style_keys):
            wins = 0
            for seed in range(n_games):
                random.seed(seed * 100 + i * 10 + j)
                result = simulate_game(SimPlayer("P1", s1), SimPlayer("P2", s2))
                if result.winner == "P1":
                    wins += 1
            win_matrix[i][j] = wins / n_games * 100

    fig, ax = plt.subplots(figsize=(8, 6))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Service Hold Rate (Server vs Receiver)")

    labels = [PLAYSTYLES[k]["label"] for k in style_keys]
    im = ax.imshow(win_matrix, cmap="RdYlGn", vmin=0, vmax=100, aspect="auto")

    ax.set_xticks(range(n))
    ax.set_yticks(range(n))
    ax.set_xticklabels(labels, rotation=45, ha="right", fontsize=9)
    ax.set_yticklabels(labels, fontsize=9)
    ax.set_xlabel("Receiver Style")
    ax.set_ylabel("Server Style")

    for i in range(n):
        for j in range(n):
            val = win_matrix[i][j]
            color = "white" if val < 30 or val > 70 else "black"
            ax.text(j, i, f"{val:.0f}%", ha="center", va="center",
                    fontsize=10, fontweight="bold", color=color)

    cbar = fig.colorbar(im, ax=ax, shrink=0.8)
    cbar.set_label("Hold %", color="#aaa")
    cbar.ax.tick_params(colors="#888")

    return _save(fig, save_path)


def chart_score_calls(n_games=50, save_path=None):
    """Chart 3: How often each score call is heard in even games."""
    _check_n_games(n_games)
    call_counts = {}
    for seed in range(n_games):
        random.seed(seed * 77)
        result = simulate_game(SimPlayer("A", "allround"), SimPlayer("B", "allround"))
        for p in result.points:
            call_counts[p.score] = call_counts.get(p.score, 0) + 1

    fig, ax = plt.subplots(figsize=(7, 7))
    fig.set_facecolor("#0f0f1a")
    _style_chart(ax, "Score Calls (All-Round vs All-Round)")

    calls = sorted(call_counts.items(), key=lambda x: -x[1])
    labels = [c[0] for c in calls]
    counts = [c[1] for c in calls]

    bars = ax.barh(labels, counts, color="#4ecdc4", edgecolor="#333", alpha=0.85)
    for bar, count in zip(bars, counts):
        ax.text(bar.get_width() + 0.3, bar.get_y() + bar.get_height() / 2,
                str(count), va="center", fontsize=9, color="#e0e0e0")

    ax.set_xlabel("Count")
    ax.invert_yaxis()
    ax.grid(True, alpha=0.15, axis="x")

    return _save(fig, save_path)


def generate_all_charts(output_dir=".", n_games=50):
    """Generate all analysis charts and save to output directory."""
    _check_n_games(n_games)
    os.makedirs(output_dir, exist_ok=True)

    charts = [
        ("chart_points_per_game.png", chart_points_per_game),
        ("chart_matchup_heatmap.png", chart_matchup_heatmap),
        ("chart_score_calls.png", chart_score_calls),
    ]

    paths = []
    for filename, chart in charts:
        path = os.path.join(output_dir, filename)
        chart(n_games=n_games, save_path=path)
        paths.append(path)
        print(f"  Saved: {path}")

    plt.close("all")
    return paths
