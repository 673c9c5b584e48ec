import time
from pathlib import Path
from typing import List, Optional

from board import Board
from constants import PROGRESS_EVERY


TRACE_HEADER = ["restart", "steps", "score", "best_score", "elapsed_s"]


class HillClimbResult:
    def __init__(
        self,
        board: Board,
        score: int,
        restarts: int,
        steps: int,
        duration: float,
        history: List[int],
    ) -> None:
        self.board = board
        self.score = score
        self.restarts = restarts
        self.steps = steps
        self.duration = duration
        self.history = history

    @property
    def solved(self) -> bool:
        return self.score == self.board.max_score()


def climb(board: Board, score: int, history: Optional[List[int]] = None) -> int:
    """Step until a swap no longer raises the score. Returns the plateau score."""
    while True:
        new_score = board.step(score)
        if history is not None:
            history.append(new_score)
        if new_score == score:
            return score
        score = new_score


class SearchRun:
    """Counters, history and trace for one restart loop. Never stops on its own."""

    def __init__(self, board: Board, verbose: bool = False, trace_path: Optional[str] = None) -> None:
        self.board = board
        self.verbose = verbose
        self.max_score = board.max_score()
        self.score = board.score()
        self.best_score = self.score
        self.history = [self.score]
        self.restarts = 0
        self.steps = 0
        self.start = time.perf_counter()
        self.trace_file = None
        if trace_path:
            tp = Path(trace_path)
            tp.parent.mkdir(parents=True, exist_ok=True)
            self.trace_file = open(tp, "w", encoding="utf-8")
            self.trace_file.write("\t".join(TRACE_HEADER) + "\n")

    def __enter__(self) -> "SearchRun":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    @property
    def solved(self) -> bool:
        return self.score == self.max_score

    def elapsed(self) -> float:
        return time.perf_counter() - self.start

    def restart_round(self) -> int:
        self.score = self.board.random_restart()
        self.restarts += 1
        self.history.append(self.score)
        before = len(self.history)
        self.score = climb(self.board, self.score, self.history)
        round_steps = len(self.history) - before
        self.steps += round_steps
        self.best_score = max(self.best_score, self.score)

        if self.trace_file is not None:
            self.trace_file.write(
                "\t".join([
                    str(self.restarts), str(round_steps), str(self.score),
                    str(self.best_score), f"{self.elapsed():.6f}",
                ]) + "\n"
            )
        if self.verbose and self.restarts % PROGRESS_EVERY == 0:
            print(
                f"Restart {self.restarts:6d} | score = {self.score:3d}/{self.max_score} | "
                f"best = {self.best_score} | steps = {self.steps}"
            )
        return self.score

    def close(self) -> None:
        if self.trace_file is not None:
            self.trace_file.close()
            self.trace_file = None

    def result(self) -> HillClimbResult:
        duration = self.elapsed()
        if self.verbose and self.solved:
            print(f"Solved after {self.restarts} restarts and {self.steps} steps in {duration:.3f}s.")
        return HillClimbResult(self.board, self.score, self.restarts, self.steps, duration, self.history)


def hill_climb(board: Board, verbose: bool = False, trace_path: Optional[str] = None) -> HillClimbResult:
    """Random-restart hill climbing until every consecutive pair is adjacent.

    Each round throws away the current arrangement with a random restart and
    then climbs to a plateau. There is no iteration cap: on an unsolvable
    puzzle this never returns. The board is modified in place.
    """
    with SearchRun(board, verbose=verbose, trace_path=trace_path) as run:
        while not run.solved:
            run.restart_round()
    return run.result()
