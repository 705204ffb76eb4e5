"""Error types raised by the game engine."""

from typing import Optional


class GameError(Exception):
    """Base exception for game-related errors."""


class ConfigurationError(GameError):
    """Raised when a game cannot be set up from the given inputs."""


class PreconditionViolation(GameError):
    """An operation was called in a phase that does not allow it."""

    def __init__(self, operation: str, phase: str, reason: Optional[str] = None):
        self.operation = operation
        self.phase = phase
        self.reason = reason
        message = f"{operation} is not allowed in phase {phase}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
