from board import Board
import view


TINY = [0, 0, 1, 0, 2, 0, 9, 0, 0]


def test_format_board_marks_givens():
    board = Board(TINY, 3)
    text = view.format_board(board)
    lines = text.splitlines()
    assert lines[0] == lines[4] == "+" + "-" * 10 + "+"
    assert lines[1] == "| 3  4  1* |"
    assert lines[2] == "| 5  2* 6  |"
    assert lines[3] == "| 9* 7  8  |"
    assert lines[-1] == "score: 6 / 8"


def test_print_board_box(capsys):
    view.print_board_box(Board(TINY, 3), title="Board:")
    out = capsys.readouterr().out
    assert out.startswith("Board:\n")
    assert "score: 6 / 8" in out


def test_plot_board_returns_figure():
    board = Board([3, 4, 1, 8, 2, 5, 9, 7, 6], 3)
    fig = view.plot_board(board, show=False)
    ax = fig.axes[0]
    # eight adjacent consecutive pairs, one line each
    assert len(ax.lines) == 8
    assert len(ax.texts) == 9
    view.plt.close(fig)


def test_plot_score_history_returns_figure():
    fig = view.plot_score_history([3, 5, 6, 6, 4, 8, 8], max_score=8, show=False)
    ax = fig.axes[0]
    assert len(ax.lines) == 2
    view.plt.close(fig)
