"""
Connect 4 game implementation.

Rules:
- 6 rows x 7 columns board
- Players drop pieces into columns, player 0 first
- First to get 4 in a row (horizontal, vertical, or diagonal) wins
- If board fills up with no winner, it's a draw

Board cells hold 0 for empty, 1 for player 0 and 2 for player 1.
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from .base import Game, GameSpec, register_game


# Board dimensions
ROWS = 6
COLS = 7
WIN_LENGTH = 4


@dataclass
class Connect4State:
    """Connect 4 game state."""
    board: np.ndarray  # shape (6, 7), dtype int8
    to_move: int = 0

    def __post_init__(self):
        if self.board.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}")
        if self.board.dtype != np.int8:
            self.board = self.board.astype(np.int8)

    def copy(self) -> Connect4State:
        return Connect4State(board=self.board.copy(), to_move=self.to_move)


@register_game("connect4")
class Connect4Game(Game[Connect4State, int]):
    """
    Connect 4 implementation.

    Actions are column indices (0-6).
    """

    _spec = GameSpec(
        name="connect4",
        board_shape=(ROWS, COLS),
        num_actions=COLS,
    )

    @property
    def spec(self) -> GameSpec:
        return self._spec

    def initial_state(self) -> Connect4State:
        """Return empty board."""
        return Connect4State(board=np.zeros((ROWS, COLS), dtype=np.int8))

    def current_player(self, state: Connect4State) -> int:
        return state.to_move

    def legal_actions(self, state: Connect4State) -> list[int]:
        """Return columns that aren't full."""
        if self.is_terminal(state):
            return []
        return [c for c in range(COLS) if state.board[0, c] == 0]

    def apply_action(self, state: Connect4State, action: int) -> Connect4State:
        """Drop the mover's piece in place and pass the turn."""
        if action < 0 or action >= COLS:
            raise ValueError(f"Invalid action {action}, must be 0-{COLS-1}")

        if state.board[0, action] != 0:
            raise ValueError(f"Column {action} is full")

        # Find lowest empty row in column
        row = ROWS - 1
        while row >= 0 and state.board[row, action] != 0:
            row -= 1

        state.board[row, action] = state.to_move + 1
        state.to_move = 1 - state.to_move
        return state

    def is_terminal(self, state: Connect4State) -> bool:
        if self.winners(state):
            return True
        return not np.any(state.board == 0)

    def winners(self, state: Connect4State) -> frozenset[int]:
        return frozenset(
            player for player in (0, 1)
            if self._has_winner(state.board, player + 1)
        )

    def render(self, state: Connect4State) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}

        lines = []
        lines.append(" " + " ".join(str(i) for i in range(COLS)))
        lines.append("-" * (COLS * 2 + 1))

        for r in range(ROWS):
            row_str = "|" + "|".join(
                symbols[state.board[r, c]] for c in range(COLS)
            ) + "|"
            lines.append(row_str)

        lines.append("-" * (COLS * 2 + 1))
        return "\n".join(lines)

    # --- Helper methods ---

    def _has_winner(self, board: np.ndarray, piece: int) -> bool:
        """Check if the given piece value has 4 in a row."""
        for r in range(ROWS):
            for c in range(COLS):
                # Horizontal
                if c <= COLS - WIN_LENGTH:
                    if self._check_line(board, r, c, 0, 1, piece):
                        return True
                # Vertical
                if r <= ROWS - WIN_LENGTH:
                    if self._check_line(board, r, c, 1, 0, piece):
                        return True
                # Diagonal down-right
                if r <= ROWS - WIN_LENGTH and c <= COLS - WIN_LENGTH:
                    if self._check_line(board, r, c, 1, 1, piece):
                        return True
                # Diagonal down-left
                if r <= ROWS - WIN_LENGTH and c >= WIN_LENGTH - 1:
                    if self._check_line(board, r, c, 1, -1, piece):
                        return True
        return False

    def _check_line(
        self,
        board: np.ndarray,
        r: int,
        c: int,
        dr: int,
        dc: int,
        piece: int
    ) -> bool:
        """Check if there are 4 in a row starting from (r,c) in direction (dr,dc)."""
        for i in range(WIN_LENGTH):
            if board[r + i * dr, c + i * dc] != piece:
                return False
        return True
