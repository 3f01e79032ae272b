from __future__ import annotations

import argparse
import random
import time

from game.board import Board
from game.keys import type_guess
from game.ruleset import DEFAULT_RULES
from solver.bisection import BisectionSolver
from state.serializer import write_json


# drop-in helper for progress and log line
def progress_print(msg: str) -> None:
    # overwrite same line, no newline
    print(f"\r\033[K{msg}", end="", flush=True)


def log_print(msg: str) -> None:
    # first terminate the progress line, then print normally
    print("\r\033[K", end="", flush=True)
    print(msg, flush=True)


def play_game(board: Board, solver: BisectionSolver, verbose=False):
    """
    Let the solver play one game on the board through key events.

    Returns:
        dict: secret, won flag, attempts, total time and per-turn times.
    """
    solver.reset()
    turn_times = []
    start_time = time.perf_counter()

    state = board.snapshot()
    while not state.is_over:
        turn_start = time.perf_counter()
        guess = solver.next_guess()
        row = state.cursor[0]
        state = type_guess(board, guess)
        solver.update(guess, state.feedback[row])
        turn_times.append(time.perf_counter() - turn_start)

        if verbose:
            log_print(f"\n--- Iteration {row + 1} ---")
            log_print(board.render())
            log_print(f"Candidates left: {solver.candidates()}")

    return {
        "secret": state.secret_code,
        "won": state.is_won,
        "attempts": state.current_attempts,
        "total_time_s": time.perf_counter() - start_time,
        "turn_time_s": turn_times,
    }


def run_benchmark(games: int, seed=None, rules=None, verbose=False):
    """Play a number of games and collect the results column-wise."""
    rules = rules or DEFAULT_RULES
    rng = random.Random(seed)
    board = Board(rules=rules, rng=rng)
    solver = BisectionSolver(rules=rules)

    results = {
        "won": [],
        "attempts": [],
        "total_time_s": [],
        "turn_time_s": [],
        "secrets": [],
    }
    for counter in range(1, games + 1):
        if counter > 1:
            board.reset()
        game = play_game(board, solver, verbose=verbose)
        results["won"].append(game["won"])
        results["attempts"].append(game["attempts"])
        results["total_time_s"].append(game["total_time_s"])
        results["turn_time_s"].append(game["turn_time_s"])
        results["secrets"].append(game["secret"])
        progress_print(f"Game {counter}/{games}: {game['secret']} in {game['attempts']}")

    log_print(f"Played {games} games.")
    return {"rules": rules["name"], "games": games, "seed": seed, "results": results}


def main():
    ap = argparse.ArgumentParser(description="Auto-play Hexle with the bisection solver")
    ap.add_argument("--games", type=int, default=10, help="Number of games to play")
    ap.add_argument("--seed", type=int, default=None, help="Seed for the secret generator")
    ap.add_argument("--out", default="benchmark.json", help="Where to write the results JSON")
    ap.add_argument("--verbose", action="store_true", help="Print the board after every guess")
    args = ap.parse_args()

    if args.games < 1:
        ap.error("--games must be at least 1")

    data = run_benchmark(args.games, seed=args.seed, verbose=args.verbose)
    write_json(data, args.out)

    # Print overall statistics
    results = data["results"]
    times = results["total_time_s"]
    attempts = results["attempts"]
    wins = sum(results["won"])
    print(f"\nWon {wins} of {len(attempts)} games.")
    print(f"Average time over {len(times)} games: {sum(times) / len(times):.6f} seconds.")
    print(f"Average attempts over {len(attempts)} games: {sum(attempts) / len(attempts):.2f} attempts.")
    print(f"Max attempts over {len(attempts)} games: {max(attempts)} attempts.")
    print(f"Min attempts over {len(attempts)} games: {min(attempts)} attempts.")
    print(f"Results written to {args.out}")


if __name__ == "__main__":
    main()
