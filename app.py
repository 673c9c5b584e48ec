import argparse
import random
import time
from statistics import median
from typing import List, Optional

from board import Board, BoardLengthError
from constants import (
    PUZZLES,
    DEFAULT_PUZZLE,
    DEFAULT_SEED,
    TIME_LIMIT_S,
    SOLVE_REPEATS,
    TRACE_DIR,
)
from hillclimb import HillClimbResult, SearchRun, hill_climb
import view


# ---------------------------
# Input helpers
# ---------------------------

def parse_values(text: str) -> List[int]:
    """Parse a comma or whitespace separated list of cell values ('.' = empty)."""
    out: List[int] = []
    for part in text.replace(",", " ").split():
        out.append(0 if part == "." else int(part))
    return out


def make_rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


# ---------------------------
# Bounded solve
# ---------------------------

def solve(
    board: Board,
    time_limit_s: Optional[float] = TIME_LIMIT_S,
    verbose: bool = True,
    trace_path: Optional[str] = None,
) -> HillClimbResult:
    """Run the hill climber, optionally stopping at a wall-clock deadline.

    Without a limit this is plain ``hill_climb``. With one, the restart loop is
    driven here so it can give up; the returned score may then be short of
    ``board.max_score()``.
    """
    if time_limit_s is None:
        return hill_climb(board, verbose=verbose, trace_path=trace_path)

    with SearchRun(board, verbose=verbose, trace_path=trace_path) as run:
        while not run.solved:
            if run.elapsed() >= time_limit_s:
                if verbose:
                    print(f"\nTime limit reached after {run.restarts} restarts.")
                break
            run.restart_round()
    return run.result()


def evaluate_over_runs(
    values: List[int],
    size: int,
    runs: int,
    seed: Optional[int] = None,
    time_limit_s: Optional[float] = None,
) -> dict:
    """Solve fresh copies of one puzzle ``runs`` times and summarize."""
    durations = []
    restarts = []
    steps = []
    successes = 0
    for i in range(runs):
        rng = make_rng(seed + i if seed is not None else None)
        board = Board(values, size, rng=rng)
        result = solve(board, time_limit_s=time_limit_s, verbose=False)
        durations.append(result.duration)
        restarts.append(result.restarts)
        steps.append(result.steps)
        if result.solved:
            successes += 1
    return {
        "runs": runs,
        "median_duration": median(durations),
        "success_rate": successes / runs,
        "avg_restarts": sum(restarts) / runs,
        "avg_steps": sum(steps) / runs,
    }


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Hidato solver using random-restart hill climbing")
    parser.add_argument("--puzzle", choices=sorted(PUZZLES), default=DEFAULT_PUZZLE, help="Built-in puzzle to solve")
    parser.add_argument("--values", type=str, default=None, help="Cell values row by row, 0 or '.' for empty (e.g. '0,0,1,0,2,0,9,0,0')")
    parser.add_argument("--size", type=int, default=None, help="Grid width for --values")
    parser.add_argument("--seed", type=int, default=DEFAULT_SEED)
    parser.add_argument("--time-limit", type=float, default=TIME_LIMIT_S)
    parser.add_argument("--repeats", type=int, default=SOLVE_REPEATS, help="Solve N times and summarize metrics")
    parser.add_argument("--trace-run", action="store_true", help="Write a per-restart trace for a single solve")
    parser.add_argument("--plot", action="store_true", help="Show the solved board and score history with matplotlib")
    parser.add_argument("--no-run", action="store_true", help="Parse and exit")

    args = parser.parse_args(argv)
    if args.no_run:
        print("Execution disabled (--no-run). Exiting.")
        return

    if args.time_limit is not None and args.time_limit <= 0:
        parser.error("--time-limit must be positive")
    if args.repeats < 1:
        parser.error("--repeats must be at least 1")

    if args.values is not None:
        if args.size is None:
            parser.error("--values requires --size")
        try:
            values = parse_values(args.values)
        except ValueError:
            parser.error(f"could not parse --values: {args.values!r}")
        size = args.size
        if size < 1:
            parser.error("--size must be positive")
        out_of_range = [v for v in values if not 0 <= v <= size * size]
        if out_of_range:
            parser.error(f"--values must lie in 0..{size * size}, got {out_of_range[0]}")
        name = "custom"
    else:
        values, size = PUZZLES[args.puzzle]
        name = args.puzzle

    try:
        board = Board(values, size, rng=make_rng(args.seed))
    except BoardLengthError as e:
        parser.error(str(e))

    print(
        f"Config | puzzle={name} | n={size} | empty={len(board.assignments)} | "
        f"seed={args.seed} | time_limit={args.time_limit} | repeats={args.repeats}"
    )

    if args.repeats > 1:
        metrics = evaluate_over_runs(values, size, args.repeats, seed=args.seed, time_limit_s=args.time_limit)
        print(
            f"Repeated {args.repeats} runs | median={metrics['median_duration']:.4f}s "
            f"success={metrics['success_rate']:.2f} | avg_restarts={metrics['avg_restarts']:.2f} | "
            f"avg_steps={metrics['avg_steps']:.2f}"
        )
        return

    trace_path = None
    if args.trace_run:
        ts = time.strftime("%Y%m%d-%H%M%S")
        trace_path = str(TRACE_DIR / f"{name}_n{size}_{ts}.trace.tsv")

    view.print_board_box(board, title="Initial board:")
    result = solve(board, time_limit_s=args.time_limit, verbose=True, trace_path=trace_path)
    view.print_board_box(result.board, title="\nBest board:" if not result.solved else "\nSolved board:")
    if args.plot:
        view.plot_board(result.board)
        view.plot_score_history(result.history, max_score=result.board.max_score())


if __name__ == "__main__":
    main()
