"""Game session - the single live state of an imposter game."""

import random
from typing import Callable, Mapping, Optional, Sequence

from ..communication.markdown_logger import MarkdownLogger
from .errors import ConfigurationError, PreconditionViolation
from .phases import GamePhase, PhaseManager
from .roles import MAX_PLAYERS, MIN_PLAYERS, Role, assign_roles, get_role


class Session:
    """One imposter game, from setup to final reveal.

    The caller owns the session and drives it with start_game,
    reveal_to_current_player, advance_player, reveal and reset. The
    category map is only read, never modified.
    """

    def __init__(
        self,
        category_map: Optional[Mapping[str, Sequence[str]]],
        rng: Optional[random.Random] = None,
        logger: Optional[MarkdownLogger] = None,
    ):
        """Initialize the session in the setup phase.

        Args:
            category_map: Category name to candidate words. None means the
                dataset is not loaded yet; every start is refused.
            rng: Random source for word choice and role shuffling.
            logger: Optional markdown logger for game review.
        """
        self.category_map = category_map
        self.rng = rng or random.Random()
        self.logger = logger
        self.phase_manager = PhaseManager()

        self.category: Optional[str] = None
        self.secret_word: Optional[str] = None
        self.roles: list[str] = []
        self.imposter_index: Optional[int] = None
        # First log write that failed; logging stops for this session after it
        self.log_error: Optional[OSError] = None

    @property
    def phase(self) -> GamePhase:
        return self.phase_manager.phase

    @property
    def player_count(self) -> int:
        return len(self.roles)

    @property
    def current_player_index(self) -> int:
        return self.phase_manager.state.current_player_index

    @property
    def current_player_number(self) -> int:
        """1-based number of the player holding the device."""
        return self.current_player_index + 1

    @property
    def show_role(self) -> bool:
        return self.phase_manager.state.show_role

    @property
    def is_last_player(self) -> bool:
        return self.current_player_index + 1 == self.player_count

    @property
    def current_role(self) -> str:
        """Role value for the player holding the device."""
        if self.phase != GamePhase.PASS_AND_REVEAL:
            raise PreconditionViolation("current_role", self.phase.value)
        return self.roles[self.current_player_index]

    @property
    def current_player_is_imposter(self) -> bool:
        if self.phase != GamePhase.PASS_AND_REVEAL:
            raise PreconditionViolation("current_player_is_imposter", self.phase.value)
        return self.current_player_index == self.imposter_index

    def role_for_current_player(self) -> Role:
        """Role descriptor shown on the current player's card."""
        return get_role("Imposter" if self.current_player_is_imposter else "Civilian")

    def check_start(self, category: str, player_count: int) -> list[str]:
        """Validate a start request.

        Returns:
            The candidate words for the category.

        Raises:
            ConfigurationError: If the game cannot start with these inputs.
        """
        if self.category_map is None:
            raise ConfigurationError("Word list is not loaded")
        if category not in self.category_map:
            raise ConfigurationError(f"Unknown category: {category!r}")
        words = list(self.category_map[category])
        if not words:
            raise ConfigurationError(f"Category {category!r} has no words")
        if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
            raise ConfigurationError(
                f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count}"
            )
        return words

    def start_game(self, category: str, player_count: int) -> bool:
        """Pick the secret word, deal roles and start passing the device.

        A start that cannot be satisfied from the category map is refused
        and the session stays in setup.

        Returns:
            True if the game started, False if the start was refused.

        Raises:
            PreconditionViolation: If a game is already in progress.
        """
        if self.phase != GamePhase.SETUP:
            raise PreconditionViolation("start_game", self.phase.value)
        try:
            words = self.check_start(category, player_count)
        except ConfigurationError:
            return False

        word = words[self.rng.randrange(len(words))]
        roles, imposter_index = assign_roles(word, player_count, self.rng)

        self.phase_manager.start_game(player_count)
        self.category = category
        self.secret_word = word
        self.roles = roles
        self.imposter_index = imposter_index

        phase_name = self.phase_manager.state.phase_name

        def write_setup(logger: MarkdownLogger) -> None:
            logger.start_game()
            logger.log_setup(category, roles, imposter_index)
            logger.log_phase_start(phase_name)

        self._log(write_setup)
        return True

    def reveal_to_current_player(self) -> None:
        """Show the current player their role."""
        self.phase_manager.reveal_to_current_player()

    def advance_player(self) -> None:
        """Hide the role and pass to the next player, or start playing."""
        state = self.phase_manager.advance_player()
        self._log(lambda logger: logger.log_phase_start(state.phase_name))

    def reveal(self) -> None:
        """Reveal the category and secret word to everyone."""
        self.phase_manager.reveal()
        category, word, imposter_index = self.category, self.secret_word, self.imposter_index
        self._log(lambda logger: logger.log_final_reveal(category, word, imposter_index))

    def reset(self) -> None:
        """Drop the current game and return to setup."""
        previous = self.phase
        self.phase_manager.reset()
        self.secret_word = None
        self.roles = []
        self.imposter_index = None

        aborted = previous != GamePhase.FINAL_REVEAL
        self._log(lambda logger: logger.log_reset(aborted=aborted))

    def _log(self, write: Callable[[MarkdownLogger], object]) -> None:
        """Run a log write once the transition is done.

        A failed write is kept in log_error and never undoes the transition.
        """
        if self.logger is None or self.log_error is not None:
            return
        try:
            write(self.logger)
        except OSError as e:
            self.log_error = e

    def __repr__(self) -> str:
        return (
            f"Session(phase={self.phase.value}, category={self.category!r}, "
            f"players={self.player_count}, current={self.current_player_index})"
        )

