"""Game engine - phases, role assignment and the live session."""

from .errors import ConfigurationError, GameError, PreconditionViolation
from .phases import GamePhase
from .roles import IMPOSTER, MAX_PLAYERS, MIN_PLAYERS, Role, ROLES
from .session import Session

__all__ = [
    "ConfigurationError",
    "GameError",
    "PreconditionViolation",
    "GamePhase",
    "IMPOSTER",
    "MAX_PLAYERS",
    "MIN_PLAYERS",
    "Role",
    "ROLES",
    "Session",
]
