"""Game phase definitions and transitions."""

from enum import Enum
from dataclasses import dataclass

from .errors import PreconditionViolation
from .roles import MAX_PLAYERS, MIN_PLAYERS


class GamePhase(Enum):
    """Phases of an imposter game."""
    SETUP = "setup"                      # Choosing category and player count
    PASS_AND_REVEAL = "pass_and_reveal"  # Device goes round, one role at a time
    PLAYING = "playing"                  # Discussion, nobody holds the device
    FINAL_REVEAL = "final_reveal"        # Category and word shown to everyone


@dataclass
class PhaseState:
    """Current state within a phase."""
    phase: GamePhase
    player_count: int = 0
    current_player_index: int = 0  # Whose turn to look at the device
    show_role: bool = False

    @property
    def phase_name(self) -> str:
        """Get a human-readable phase name with the current player."""
        if self.phase == GamePhase.PASS_AND_REVEAL:
            return f"pass_player_{self.current_player_index + 1}"
        return self.phase.value


class PhaseManager:
    """Manages phase transitions and state.

    Each transition either applies fully or raises PreconditionViolation
    with the state left as it was.
    """

    def __init__(self):
        self.state = PhaseState(phase=GamePhase.SETUP)

    @property
    def phase(self) -> GamePhase:
        return self.state.phase

    def _require(self, operation: str, *phases: GamePhase) -> None:
        if self.state.phase not in phases:
            raise PreconditionViolation(operation, self.state.phase.value)

    def start_game(self, player_count: int) -> PhaseState:
        """Leave setup and hand the device to the first player."""
        self._require("start_game", GamePhase.SETUP)
        if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            raise ValueError(
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count}"
            )
        self.state = PhaseState(
            phase=GamePhase.PASS_AND_REVEAL,
            player_count=player_count,
            current_player_index=0,
            show_role=False,
        )
        return self.state

    def reveal_to_current_player(self) -> PhaseState:
        """Show the current player their role. Calling it twice is harmless."""
        self._require("reveal_to_current_player", GamePhase.PASS_AND_REVEAL)
        self.state.show_role = True
        return self.state

    def advance_player(self) -> PhaseState:
        """Hide the role and pass to the next player.

        Returns:
            The new phase state; PLAYING once every player has looked.
        """
        self._require("advance_player", GamePhase.PASS_AND_REVEAL)
        if not self.state.show_role:
            raise PreconditionViolation(
                "advance_player",
                self.state.phase.value,
                f"player {self.state.current_player_index + 1} has not seen their role",
            )

        if self.state.current_player_index + 1 < self.state.player_count:
            self.state = PhaseState(
                phase=GamePhase.PASS_AND_REVEAL,
                player_count=self.state.player_count,
                current_player_index=self.state.current_player_index + 1,
            )
        else:
            self.state = PhaseState(
                phase=GamePhase.PLAYING,
                player_count=self.state.player_count,
            )
        return self.state

    def reveal(self) -> PhaseState:
        """End the discussion and show the word to everyone."""
        self._require("reveal", GamePhase.PLAYING)
        self.state = PhaseState(
            phase=GamePhase.FINAL_REVEAL,
            player_count=self.state.player_count,
        )
        return self.state

    def reset(self) -> PhaseState:
        """Abandon or finish the game and go back to setup."""
        self._require(
            "reset",
            GamePhase.PASS_AND_REVEAL,
            GamePhase.PLAYING,
            GamePhase.FINAL_REVEAL,
        )
        self.state = PhaseState(phase=GamePhase.SETUP)
        return self.state
