"""Battle-layer exceptions."""


class BattleError(Exception):
    """Base exception for the battle engine."""


class InvalidStateError(BattleError, RuntimeError):
    """Raised when an action is submitted outside the player's input phase."""


class InvariantViolation(BattleError, AssertionError):
    """Raised when battle state breaks a rule the engine guarantees.

    This is a programming error, never something a player can trigger.
    """
