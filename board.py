import random
from typing import List, Optional, Sequence


class BoardLengthError(ValueError):
    def __init__(self, length: int, size: int):
        self.length = length
        self.size = size
        if size < 1:
            message = f"board width must be positive, got {size}"
        else:
            message = f"board of width {size} needs {size * size} values, got {length}"
        super().__init__(message)


class Board:
    """n x n Hidato grid, row-major. Input values lie in 0..n*n, 0 = empty."""

    def __init__(self, values: Sequence[int], size: int, rng: Optional[random.Random] = None):
        if size < 1 or len(values) != size * size:
            raise BoardLengthError(len(values), size)
        self.size = size
        self.state = list(values)
        # Each board owns its generator; never the module-level one
        self.rng = rng if rng is not None else random.Random()

        assignments = []
        seen = [False] * (size * size + 1)
        for idx, value in enumerate(self.state):
            if value == 0:
                assignments.append(idx)
            seen[value] = True
        self.assignments = tuple(assignments)

        next_unseen = 1
        for idx in self.assignments:
            while seen[next_unseen]:
                next_unseen += 1
            self.state[idx] = next_unseen
            seen[next_unseen] = True
            next_unseen += 1

    def __len__(self) -> int:
        return len(self.state)

    def __str__(self) -> str:
        lines = [str(row) for row in self.rows()]
        lines.append(f"score: {self.score()}")
        return "\n".join(lines) + "\n"

    def rows(self) -> List[List[int]]:
        n = self.size
        return [self.state[i:i + n] for i in range(0, len(self.state), n)]

    def missing_values(self) -> List[int]:
        return sorted(self.state[idx] for idx in self.assignments)

    def clone(self, rng: Optional[random.Random] = None) -> "Board":
        other = Board.__new__(Board)
        other.size = self.size
        other.state = self.state[:]
        other.assignments = self.assignments
        other.rng = rng if rng is not None else random.Random()
        return other

    def score(self) -> int:
        """Count consecutive pairs (k, k+1) sitting on king's-move neighbours.

        Each adjacency is looked at once, from its upper/left end.
        """
        n = self.size
        state = self.state
        total_cells = len(state)
        total = 0
        for idx, value in enumerate(state):
            col = idx % n
            neighbors = [idx + n]
            if col != 0:
                neighbors.append(idx + n - 1)
            if col != n - 1:
                neighbors.append(idx + 1)
                neighbors.append(idx + n + 1)
            for pos in neighbors:
                if pos < total_cells and abs(state[pos] - value) == 1:
                    total += 1
        return total

    def max_score(self) -> int:
        return len(self.state) - 1

    def is_solved(self) -> bool:
        return self.score() == self.max_score()

    def random_restart(self) -> int:
        """Uniformly shuffle the values at the mutable positions."""
        cells = self.assignments
        state = self.state
        for i in range(len(cells) - 1, 0, -1):
            j = self.rng.randint(0, i)
            a, b = cells[i], cells[j]
            state[a], state[b] = state[b], state[a]
        return self.score()

    def step(self, current_score: int) -> int:
        """Apply the best strictly improving swap of two mutable cells, if any."""
        state = self.state
        cells = self.assignments
        best_score = current_score
        best_pair = None
        for i, p in enumerate(cells):
            for q in cells[i + 1:]:
                state[p], state[q] = state[q], state[p]
                trial = self.score()
                if trial > best_score:
                    best_score = trial
                    best_pair = (p, q)
                # revert for next candidate
                state[p], state[q] = state[q], state[p]
        if best_pair is not None:
            p, q = best_pair
            state[p], state[q] = state[q], state[p]
        return best_score
