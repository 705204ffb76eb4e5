"""Markdown logger for game setup and events."""

from datetime import datetime
from pathlib import Path
from typing import Optional


class MarkdownLogger:
    """Writes game events to markdown files for later review."""

    def __init__(self, base_dir: str = "games"):
        """Initialize the logger.

        Args:
            base_dir: Base directory for game logs.
        """
        self.base_dir = Path(base_dir)
        self.game_dir: Optional[Path] = None
        self.game_id: Optional[str] = None

    @property
    def game_file(self) -> Path:
        if self.game_dir is None:
            raise RuntimeError("start_game() must be called before logging")
        return self.game_dir / "game_state.md"

    def start_game(self, game_id: Optional[str] = None) -> Path:
        """Start logging a new game.

        Args:
            game_id: Optional game identifier. If not provided, uses timestamp.

        Returns:
            Path to the game directory.
        """
        if game_id is None:
            timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
            game_id = f"game_{timestamp}"

        # Several games can start within the same second
        candidate = game_id
        suffix = 1
        while (self.base_dir / candidate).exists():
            suffix += 1
            candidate = f"{game_id}_{suffix}"

        game_dir = self.base_dir / candidate
        game_dir.mkdir(parents=True, exist_ok=True)
        self.game_id = candidate
        self.game_dir = game_dir

        self._write_game_header()

        return self.game_dir

    def _write_game_header(self) -> None:
        """Write the initial game state file header."""
        with open(self.game_file, "w", encoding="utf-8") as f:
            f.write(f"# Imposter Game - {self.game_id}\n\n")
            f.write(f"Started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n\n")
            f.write("---\n\n")

    def log_setup(
        self,
        category: str,
        roles: list[str],
        imposter_index: int,
    ) -> None:
        """Log game setup information.

        Args:
            category: Chosen category.
            roles: Role value dealt to each seat, in pass order.
            imposter_index: Seat holding the imposter.
        """
        with open(self.game_file, "a", encoding="utf-8") as f:
            f.write("## Setup\n\n")
            f.write(f"- Category: {category}\n")
            f.write(f"- Players: {len(roles)}\n\n")
            f.write("| Player | Role (Hidden) |\n")
            f.write("|--------|---------------|\n")
            for i, role in enumerate(roles):
                label = "Imposter" if i == imposter_index else f"Civilian ({role})"
                f.write(f"| Player {i + 1} | {label} |\n")
            f.write("\n---\n\n")

    def log_phase_start(self, phase: str) -> None:
        """Log the start of a game phase.

        Args:
            phase: Phase name (e.g., "pass_player_2", "playing").
        """
        with open(self.game_file, "a", encoding="utf-8") as f:
            f.write(f"## {phase.replace('_', ' ').title()}\n\n")

    def log_final_reveal(
        self,
        category: str,
        secret_word: str,
        imposter_index: int,
    ) -> None:
        """Log the word reveal at the end of the discussion.

        Args:
            category: The category played.
            secret_word: The word the civilians held.
            imposter_index: Seat holding the imposter.
        """
        with open(self.game_file, "a", encoding="utf-8") as f:
            f.write("## Final Reveal\n\n")
            f.write(f"- Category: **{category}**\n")
            f.write(f"- Secret word: **{secret_word}**\n")
            f.write(f"- Imposter: Player {imposter_index + 1}\n\n")

    def log_reset(self, aborted: bool = False) -> None:
        """Log the end of the game.

        Args:
            aborted: True if the game was dropped before the final reveal.
        """
        with open(self.game_file, "a", encoding="utf-8") as f:
            f.write("---\n\n")
            if aborted:
                f.write("*Game aborted before the reveal.*\n")
            f.write(f"\nEnded: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}\n")
