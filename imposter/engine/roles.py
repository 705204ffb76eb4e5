"""Role definitions and role assignment for the Imposter game."""

import random
from dataclasses import dataclass
from typing import Literal

# Value handed to the one player who does not get the word
IMPOSTER = "IMPOSTER"

MIN_PLAYERS = 3
MAX_PLAYERS = 12


@dataclass(frozen=True)
class Role:
    """A role in the Imposter game."""

    name: str
    team: Literal["civilian", "imposter"]
    description: str = ""

    def __str__(self) -> str:
        return self.name


ROLES = {
    "Civilian": Role(
        name="Civilian",
        team="civilian",
        description="You know the secret word. Find the player who doesn't.",
    ),
    "Imposter": Role(
        name="Imposter",
        team="imposter",
        description="Blend in. Don't get caught.",
    ),
}


def get_role(name: str) -> Role:
    """Get a role by name."""
    if name not in ROLES:
        raise ValueError(f"Unknown role: {name}. Available: {list(ROLES.keys())}")
    return ROLES[name]


def clamp_player_count(player_count: int) -> int:
    """Clamp a requested player count into the playable range."""
    return max(MIN_PLAYERS, min(MAX_PLAYERS, player_count))


def build_roles(secret_word: str, player_count: int) -> list[str]:
    """Build the unshuffled role list: civilians first, imposter last.

    Args:
        secret_word: Word given to every civilian.
        player_count: Total number of players.

    Returns:
        A list of player_count - 1 copies of the word plus one IMPOSTER.
    """
    if not MIN_PLAYERS <= player_count <= MAX_PLAYERS:
        raise ValueError(
            f"Player count must be between {MIN_PLAYERS} and {MAX_PLAYERS}, got {player_count}"
        )
    roles = [secret_word] * (player_count - 1)
    roles.append(IMPOSTER)
    return roles


def shuffle_roles(roles: list[str], rng: random.Random) -> list[str]:
    """Shuffle roles in place with a Fisher-Yates pass.

    Walks from the last index down to 1, swapping each slot with a uniformly
    chosen slot at or below it, so every ordering is equally likely.

    Args:
        roles: Role list to permute.
        rng: Random source; pass a seeded random.Random for repeatable deals.

    Returns:
        The same list, shuffled.
    """
    for i in range(len(roles) - 1, 0, -1):
        j = rng.randint(0, i)
        roles[i], roles[j] = roles[j], roles[i]
    return roles


def assign_roles(secret_word: str, player_count: int, rng: random.Random) -> tuple[list[str], int]:
    """Deal roles for a new game.

    Returns:
        The shuffled roles and the seat index holding the imposter.
    """
    roles = build_roles(secret_word, player_count)
    # Shuffle seat indices, not values: the imposter seat must stay known
    # even when the word itself is "IMPOSTER".
    seats = list(range(player_count))
    order = shuffle_roles(seats, rng)
    dealt = [roles[seat] for seat in order]
    return dealt, order.index(player_count - 1)
