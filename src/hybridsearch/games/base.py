"""
Abstract base classes for searchable games.

Any game that implements the Game interface can be played by the agents.
The search doesn't need to know anything about the game rules - it just
needs these methods to:
1. Know what moves are legal (and who makes them)
2. Apply moves to private copies of a state
3. Know when the game is over and who won
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TypeVar, Generic


@dataclass(frozen=True)
class GameSpec:
    """
    Describes a game's board and action space for display.
    """
    name: str
    board_shape: tuple[int, ...]  # e.g., (6, 7) for Connect4
    num_actions: int              # e.g., 7 for Connect4


# Type variables for game state and action
State = TypeVar('State')
Action = TypeVar('Action')


def opponent_of(player: int) -> int:
    """Return the other player of a two-player game (players are 0 and 1)."""
    return 1 - player


class Game(ABC, Generic[State, Action]):
    """
    Abstract base class for any two-player perfect-information game.

    Key concepts:
    - State: The full game state (board position, whose turn, etc.)
    - Action: A legal move in the game, only meaningful for the state
      that produced it
    - Player: 0 or 1, in absolute terms (not relative to the mover)

    apply_action() is allowed to mutate the state it is given. Code that
    explores speculative moves must therefore work on copies it owns,
    which is what next_state() does.
    """

    # False for games where both sides may have moves in the same state;
    # the search then filters legal_actions() by action_player().
    is_alternating: bool = True

    @property
    @abstractmethod
    def spec(self) -> GameSpec:
        """Return the game specification."""
        pass

    @property
    def name(self) -> str:
        return self.spec.name

    @abstractmethod
    def initial_state(self) -> State:
        """Return the starting state of the game (player 0 to move)."""
        pass

    @abstractmethod
    def current_player(self, state: State) -> int:
        """Return the player whose turn it is."""
        pass

    @abstractmethod
    def legal_actions(self, state: State) -> list[Action]:
        """
        Return list of legal actions from this state.

        Args:
            state: Current game state

        Returns:
            List of legal actions, empty if the game is over
        """
        pass

    @abstractmethod
    def apply_action(self, state: State, action: Action) -> State:
        """
        Apply action and return the successor state.

        Implementations may update `state` in place and return it. Callers
        that need the original afterwards must pass a copy.

        Args:
            state: Game state owned by the caller
            action: Action to apply

        Returns:
            Successor state
        """
        pass

    @abstractmethod
    def is_terminal(self, state: State) -> bool:
        """Check if the game is over."""
        pass

    @abstractmethod
    def winners(self, state: State) -> frozenset[int]:
        """
        Return the players who have won.

        Empty for draws and for states that are not over yet.
        """
        pass

    def action_player(self, state: State, action: Action) -> int:
        """
        Return the player who makes `action`.

        Default is the player to move, which is always right for
        alternating games. Non-alternating games override this.
        """
        return self.current_player(state)

    def legal_actions_for(self, state: State, player: int) -> list[Action]:
        """Return the legal actions that belong to `player`."""
        return [
            action for action in self.legal_actions(state)
            if self.action_player(state, action) == player
        ]

    def copy_state(self, state: State) -> State:
        """
        Create a copy of the state.

        Override if your state needs special copying logic.
        """
        if hasattr(state, 'copy'):
            return state.copy()
        return state

    def next_state(self, state: State, action: Action) -> State:
        """Apply action to a fresh copy, leaving `state` untouched."""
        return self.apply_action(self.copy_state(state), action)

    def render(self, state: State) -> str:
        """
        Render state as string for display.

        Optional - default returns empty string.
        """
        return ""

    def parse_action(self, text: str) -> Action:
        """
        Parse a user-supplied action (CLI input).

        Default handles integer actions.
        """
        return int(text)


# Registry of available games
_GAME_REGISTRY: dict[str, type[Game]] = {}


def register_game(name: str):
    """Decorator to register a game class."""
    def decorator(cls: type[Game]):
        _GAME_REGISTRY[name] = cls
        return cls
    return decorator


def get_game(name: str) -> Game:
    """Get a game instance by name."""
    if name not in _GAME_REGISTRY:
        available = ", ".join(_GAME_REGISTRY.keys())
        raise ValueError(f"Unknown game '{name}'. Available: {available}")
    return _GAME_REGISTRY[name]()


def list_games() -> list[str]:
    """List all registered games."""
    return list(_GAME_REGISTRY.keys())
