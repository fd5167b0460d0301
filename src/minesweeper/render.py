"""
Text rendering for a Minesweeper board.

Maps read-only board snapshots to a character grid and a status line.
"""
from .board import Board, GameStatus


HIDDEN_GLYPH = "."
FLAG_GLYPH = "F"
MINE_GLYPH = "*"
EMPTY_GLYPH = " "

STATUS_TEXT = {
    GameStatus.PLAYING: "Playing...",
    GameStatus.WON: "You Won!",
    GameStatus.LOST: "Game Over!",
}

FACES = {
    GameStatus.PLAYING: ":)",
    GameStatus.WON: "B)",
    GameStatus.LOST: "X(",
}


def render_board(board: Board) -> str:
    """Render board as ASCII string with row and column headers."""
    width = len(str(max(board.rows, board.cols) - 1))
    lines = [
        " " * (width + 1)
        + " ".join(str(col).rjust(width) for col in range(board.cols))
    ]

    for row_index, row in enumerate(board.get_board_snapshot()):
        glyphs = []
        for cell in row:
            if cell.is_flagged:
                glyph = FLAG_GLYPH
            elif not cell.is_revealed:
                glyph = HIDDEN_GLYPH
            elif cell.is_mine:
                glyph = MINE_GLYPH
            elif cell.adjacent_mines == 0:
                glyph = EMPTY_GLYPH
            else:
                glyph = str(cell.adjacent_mines)
            glyphs.append(glyph.rjust(width))
        lines.append(str(row_index).rjust(width) + " " + " ".join(glyphs))

    return "\n".join(lines)


def render_status(board: Board) -> str:
    """Render the mine counter, face and status text."""
    return (
        f"Mines: {board.mines_remaining}  "
        f"{FACES[board.status]}  {STATUS_TEXT[board.status]}"
    )


def render(board: Board) -> str:
    """Render status line followed by the grid."""
    return render_status(board) + "\n" + render_board(board)
