"""
Tic-Tac-Toe game implementation.

Simple 3x3 game - small enough for the search to solve outright,
which makes it the reference game for testing.

Rules:
- 3x3 board
- Players alternate placing their mark, player 0 (X) first
- First to get 3 in a row (horizontal, vertical, diagonal) wins
- If board fills with no winner, it's a draw
"""

from __future__ import annotations

from dataclasses import dataclass
import numpy as np

from .base import Game, GameSpec, register_game


BOARD_SIZE = 3

# Cell values: player 0 -> 1, player 1 -> 2, empty -> 0
EMPTY = 0


@dataclass
class TicTacToeState:
    """Tic-Tac-Toe game state in absolute (not canonical) form."""
    board: np.ndarray  # shape (3, 3), dtype int8
    to_move: int = 0

    def __post_init__(self):
        if self.board.shape != (BOARD_SIZE, BOARD_SIZE):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        if self.board.dtype != np.int8:
            self.board = self.board.astype(np.int8)

    def copy(self) -> TicTacToeState:
        return TicTacToeState(board=self.board.copy(), to_move=self.to_move)


@register_game("tictactoe")
class TicTacToeGame(Game[TicTacToeState, int]):
    """
    Tic-Tac-Toe implementation.

    Actions are cell indices (0-8), mapping to positions:
    0 | 1 | 2
    ---------
    3 | 4 | 5
    ---------
    6 | 7 | 8
    """

    _spec = GameSpec(
        name="tictactoe",
        board_shape=(BOARD_SIZE, BOARD_SIZE),
        num_actions=BOARD_SIZE * BOARD_SIZE,  # 9
    )

    # Winning lines (indices into flattened board)
    WINNING_LINES = [
        # Rows
        [0, 1, 2],
        [3, 4, 5],
        [6, 7, 8],
        # Columns
        [0, 3, 6],
        [1, 4, 7],
        [2, 5, 8],
        # Diagonals
        [0, 4, 8],
        [2, 4, 6],
    ]

    @property
    def spec(self) -> GameSpec:
        return self._spec

    def initial_state(self) -> TicTacToeState:
        """Return empty board."""
        return TicTacToeState(
            board=np.zeros((BOARD_SIZE, BOARD_SIZE), dtype=np.int8)
        )

    def from_string(self, text: str) -> TicTacToeState:
        """
        Build a state from 9 characters (X, O, or '.'), row by row.

        Whitespace is ignored. The player to move is derived from the
        piece counts.
        """
        cells = [ch for ch in text if not ch.isspace()]
        if len(cells) != BOARD_SIZE * BOARD_SIZE:
            raise ValueError(f"Expected 9 cells, got {len(cells)}")

        values = {".": EMPTY, "X": 1, "O": 2}
        try:
            flat = np.array([values[ch.upper()] for ch in cells], dtype=np.int8)
        except KeyError as e:
            raise ValueError(f"Invalid cell {e}") from None

        x_count = int(np.sum(flat == 1))
        o_count = int(np.sum(flat == 2))
        if x_count - o_count not in (0, 1):
            raise ValueError("X moves first; piece counts are inconsistent")

        return TicTacToeState(
            board=flat.reshape(BOARD_SIZE, BOARD_SIZE),
            to_move=x_count - o_count,
        )

    def current_player(self, state: TicTacToeState) -> int:
        return state.to_move

    def legal_actions(self, state: TicTacToeState) -> list[int]:
        """Return empty cells as actions."""
        if self.is_terminal(state):
            return []
        flat = state.board.flatten()
        return [i for i in range(9) if flat[i] == EMPTY]

    def apply_action(self, state: TicTacToeState, action: int) -> TicTacToeState:
        """Place the mover's piece in place and pass the turn."""
        if action < 0 or action >= 9:
            raise ValueError(f"Invalid action {action}, must be 0-8")

        row, col = divmod(action, BOARD_SIZE)
        if state.board[row, col] != EMPTY:
            raise ValueError(f"Cell {action} is already occupied")

        state.board[row, col] = state.to_move + 1
        state.to_move = 1 - state.to_move
        return state

    def is_terminal(self, state: TicTacToeState) -> bool:
        if self._line_owners(state):
            return True
        return not np.any(state.board == EMPTY)

    def winners(self, state: TicTacToeState) -> frozenset[int]:
        return frozenset(self._line_owners(state))

    def render(self, state: TicTacToeState) -> str:
        """Render board as ASCII art."""
        symbols = {0: ".", 1: "X", 2: "O"}

        lines = []
        for r in range(BOARD_SIZE):
            row_str = " | ".join(
                symbols[state.board[r, c]] for c in range(BOARD_SIZE)
            )
            lines.append(f" {row_str} ")
            if r < BOARD_SIZE - 1:
                lines.append("-----------")

        return "\n".join(lines)

    # --- Helper methods ---

    def _line_owners(self, state: TicTacToeState) -> set[int]:
        """Players (0/1) owning a complete line."""
        flat = state.board.flatten()
        owners = set()
        for line in self.WINNING_LINES:
            first = flat[line[0]]
            if first != EMPTY and all(flat[i] == first for i in line):
                owners.add(int(first) - 1)
        return owners
