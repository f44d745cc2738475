"""Terminal renderer for command-line play."""

STONES = {0: "·", 1: "●", 2: "○"}
LAST_STONES = {1: "◆", 2: "◇"}


def format_board(session):
    cells = session.snapshot()
    win = set(session.win_line or ())
    lines = ["   " + " ".join(str(c % 10) for c in range(len(cells)))]
    for row, values in enumerate(cells):
        marks = []
        for col, value in enumerate(values):
            if (row, col) == session.last_move or (row, col) in win:
                marks.append(LAST_STONES[value])
            else:
                marks.append(STONES[value])
        lines.append(f"{row:2d} " + " ".join(marks))
    return "\n".join(lines)


class TextView:
    def __init__(self, out=print):
        self.out = out

    def render(self, session):
        self.out(format_board(session))
        self.out(session.status_text())
