from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import TICTACTOE_LOSS_SCORE, TICTACTOE_WIN_SCORE
from ..exceptions import InvalidActionError

EMPTY = "."
MARKS = ("X", "O")

LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


class Board:
    """Mutable 3x3 board shared by both players of one game. X moves first."""

    def __init__(self, cells: str = EMPTY * 9) -> None:
        if len(cells) != 9:
            raise ValueError(f"Board needs 9 cells, got {len(cells)}")
        self.cells = list(cells)

    @property
    def to_move(self) -> str:
        placed = sum(1 for cell in self.cells if cell != EMPTY)
        return MARKS[placed % 2]

    def winner(self) -> Optional[str]:
        for a, b, c in LINES:
            if self.cells[a] != EMPTY and self.cells[a] == self.cells[b] == self.cells[c]:
                return self.cells[a]
        return None

    def free_cells(self) -> List[int]:
        return [i for i, cell in enumerate(self.cells) if cell == EMPTY]

    def is_over(self) -> bool:
        return self.winner() is not None or not self.free_cells()

    def place(self, index: int, mark: str) -> None:
        if self.is_over():
            raise InvalidActionError("The game is already over")
        if mark != self.to_move:
            raise InvalidActionError(f"It is {self.to_move}'s turn, not {mark}'s")
        if index not in self.free_cells():
            raise InvalidActionError(f"Cell {index!r} is not free")
        self.cells[index] = mark

    def __str__(self) -> str:
        return "".join(self.cells)


class TicTacToe:
    """One player's view of a shared ``Board``."""

    def __init__(self, board: Board, mark: str) -> None:
        if mark not in MARKS:
            raise ValueError(f"Unknown mark {mark!r}")
        self.board = board
        self.mark = mark

    def legal_actions(self) -> List[int]:
        if self.board.is_over():
            return []
        return self.board.free_cells()

    def state_key(self) -> str:
        return str(self.board)

    def is_terminal(self) -> bool:
        return self.board.is_over()

    def current_score(self) -> int:
        winner = self.board.winner()
        if winner is None:
            return 0
        return TICTACTOE_WIN_SCORE if winner == self.mark else TICTACTOE_LOSS_SCORE

    def apply(self, action: int) -> None:
        self.board.place(action, self.mark)


def tictactoe_cohort() -> List[TicTacToe]:
    """X and O views over one fresh board, in move order."""
    board = Board()
    return [TicTacToe(board, mark) for mark in MARKS]


__all__ = ["Board", "TicTacToe", "tictactoe_cohort", "EMPTY", "MARKS", "LINES"]
