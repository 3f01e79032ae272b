import argparse
import json
from pathlib import Path

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt


def _annotate_points(ax, xs, ys, *, fmt="{:.2f}", dx=0, dy=6, fontsize=8):
        """
        Annotate points (x, y) on ax with formatted y values.

        Args:
            ax: matplotlib Axes
            xs: list of x coordinates
            ys: list of y coordinates
            fmt: format string for y values
            dx: x offset in points
            dy: y offset in points
            fontsize: font size for annotations
        """

        for x, y in zip(xs, ys):
            if y is None or np.isnan(y):
                continue
            ax.annotate(
                fmt.format(y),
                (x, y),
                textcoords="offset points",
                xytext=(dx, dy),
                ha="center",
                va="center",
                fontsize=fontsize,
            )


def compute_run_stats(results: dict, max_attempts: int = 6):
    """
    Returns a dict with:
      win_rate (float, np.nan if no games)
      avg_attempts, min_attempts, max_attempts (won games only, np.nan if none)
      attempt_counts (list[int]) number of won games per attempt count 1..max_attempts
      avg_turn_times, min_turn_times, max_turn_times (list[float]) per turn index
      n_games, n_won (int)
    """
    won = np.array(results.get("won", []), dtype=bool)
    attempts = np.array(results.get("attempts", []), dtype=np.int64)

    # Guard against length mismatches
    n = min(len(won), len(attempts))
    won = won[:n]
    attempts = attempts[:n]

    won_attempts = attempts[won]
    n_won = int(won_attempts.size)

    stats = {
        "n_games": n,
        "n_won": n_won,
        "win_rate": float(n_won / n) if n > 0 else np.nan,
        "avg_attempts": float(np.mean(won_attempts)) if n_won else np.nan,
        "min_attempts": float(np.min(won_attempts)) if n_won else np.nan,
        "max_attempts": float(np.max(won_attempts)) if n_won else np.nan,
        "attempt_counts": [
            int(np.count_nonzero(won_attempts == k))
            for k in range(1, max_attempts + 1)
        ],
    }

    # avg, min, max time per turn index across all games
    turn_rows = results.get("turn_time_s", [])[:n]
    avg_turn_times = []
    min_turn_times = []
    max_turn_times = []
    for t in range(max_attempts):
        vals = [float(row[t]) for row in turn_rows if t < len(row) and row[t] is not None]
        avg_turn_times.append(float(np.mean(vals)) if vals else np.nan)
        min_turn_times.append(float(np.min(vals)) if vals else np.nan)
        max_turn_times.append(float(np.max(vals)) if vals else np.nan)
    stats["avg_turn_times"] = avg_turn_times
    stats["min_turn_times"] = min_turn_times
    stats["max_turn_times"] = max_turn_times

    return stats


def plot_attempts(stats: dict, out: Path):
    counts = stats["attempt_counts"]
    x = np.arange(1, len(counts) + 1)
    plt.figure(figsize=(10, 6))
    plt.bar(x, counts, color="#16a34a")
    _annotate_points(plt.gca(), x, counts, fmt="{:.0f}", dy=8)
    plt.title(f"Guesses needed ({stats['n_won']}/{stats['n_games']} games won)")
    plt.xlabel("Attempts")
    plt.ylabel("Games")
    plt.xticks(x)
    plt.grid(True, axis="y")
    plt.savefig(out, dpi=200, bbox_inches="tight")
    plt.close()


def plot_turn_times(stats: dict, out: Path):
    y_avg = np.array(stats["avg_turn_times"], dtype=float)
    y_min = np.array(stats["min_turn_times"], dtype=float)
    y_max = np.array(stats["max_turn_times"], dtype=float)
    x = np.arange(1, len(y_avg) + 1)
    # Times are tiny, show them in milliseconds
    y_avg, y_min, y_max = y_avg * 1000, y_min * 1000, y_max * 1000

    plt.figure(figsize=(10, 6))
    plt.plot(x, y_avg, marker="o", label="average")
    plt.scatter(x, y_min, marker="v", s=20, label="min")
    plt.scatter(x, y_max, marker="^", s=20, label="max")
    plt.fill_between(x, y_min, y_max, alpha=0.2)
    _annotate_points(plt.gca(), x, y_avg, fmt="{:.3f}ms", dy=8)
    plt.title("Turn Time")
    plt.xlabel("Turn Number")
    plt.ylabel("Turn Time (ms)")
    plt.xticks(x)
    plt.legend()
    plt.grid(True)
    plt.savefig(out, dpi=200, bbox_inches="tight")
    plt.close()


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--file", default="benchmark.json", help="Path to benchmark JSON")
    ap.add_argument("--outdir", default="./results", help="Output directory for PNGs")
    ap.add_argument("--max-attempts", type=int, default=6, help="Rows per game")
    args = ap.parse_args()

    path = Path(args.file)
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)

    with path.open("r", encoding="utf-8") as f:
        results = json.load(f).get("results")

    if not results:
        raise ValueError(f"No results found in {path}.")

    stats = compute_run_stats(results, max_attempts=args.max_attempts)
    print(
        f"{stats['n_won']}/{stats['n_games']} won, "
        f"average {stats['avg_attempts']:.2f} attempts"
    )

    plot_attempts(stats, outdir / "attempts.png")
    plot_turn_times(stats, outdir / "turn_times.png")
    print(f"Plots written to {outdir}")


if __name__ == "__main__":
    main()
