from typing import Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt

from board import Board


#####################################################################################
## Console output
## One line per row, values right-aligned to the widest number, then the score

def format_board(board: Board) -> str:
    width = len(str(len(board)))
    n = board.size
    fixed = set(range(len(board))) - set(board.assignments)
    border = "+" + "-" * (n * (width + 2) + 1) + "+"
    lines = [border]
    for r, row in enumerate(board.rows()):
        cells = []
        for c, value in enumerate(row):
            ## Fixed (given) cells are marked with a star
            mark = "*" if (r * n + c) in fixed else " "
            cells.append(f"{value:>{width}}{mark}")
        lines.append("| " + " ".join(cells) + " |")
    lines.append(border)
    lines.append(f"score: {board.score()} / {board.max_score()}")
    return "\n".join(lines)


def print_board_box(board: Board, title: Optional[str] = None) -> None:
    if title:
        print(title)
    print(format_board(board))


#####################################################################################
## Use of matplotlib
## Grey background, given cells shaded darker, and a line drawn through every
## consecutive pair that already sits on neighbouring cells

def _value_positions(board: Board) -> np.ndarray:
    ## positions[v] = (row, col) of value v; row 0 unused
    positions = np.zeros((len(board) + 1, 2), dtype=int)
    for idx, value in enumerate(board.state):
        positions[value] = divmod(idx, board.size)
    return positions


def plot_board(board: Board, show: bool = True):
    n = board.size
    fig, ax = plt.subplots(figsize=(8, 8))
    fig.patch.set_facecolor('grey')
    ax.set_facecolor('grey')

    shading = np.zeros((n, n))
    for idx in set(range(len(board))) - set(board.assignments):
        shading[divmod(idx, n)] = 1
    ax.imshow(shading, cmap='Greys', vmin=0, vmax=2, interpolation='nearest')

    positions = _value_positions(board)
    steps = np.abs(np.diff(positions[1:], axis=0)).max(axis=1)
    for v, step in enumerate(steps, start=1):
        if step == 1:
            (r1, c1), (r2, c2) = positions[v], positions[v + 1]
            ax.plot([c1, c2], [r1, r2], 'b-', linewidth=2, alpha=0.5)

    for idx, value in enumerate(board.state):
        r, c = divmod(idx, n)
        ax.text(c, r, str(value), fontsize=(120 / n), ha='center', va='center',
                color='black', weight='bold')

    ax.set_xticks([])
    ax.set_yticks([])
    ax.set_title(f'{n}x{n} Hidato | score {board.score()} / {board.max_score()}', color='white', fontsize=16)
    plt.tight_layout()
    if show:
        plt.show()
    return fig


#####################################################################################
def plot_score_history(history: Sequence[int], max_score: Optional[int] = None, show: bool = True):
    fig, ax = plt.subplots(figsize=(8, 8))
    x_values = np.arange(len(history))
    ax.plot(x_values, history, 'b-', linewidth=2, marker='o', markersize=4)
    if max_score is not None:
        ax.axhline(max_score, color='green', linestyle='--', linewidth=1)

    ax.set_xlabel('Restarts and steps', fontsize=10)
    ax.set_ylabel('Score', fontsize=10)
    ax.set_title('Score per search move')
    ax.grid(True, alpha=0.3)

    plt.tight_layout()
    if show:
        plt.show()
    return fig
