# src/bouncer/core/errors.py

class BouncerError(ValueError):
    """Base class for contract violations raised by the simulation core."""


class InvalidPositionMode(BouncerError):
    def __init__(self, axis: str, mode):
        self.axis = axis
        self.mode = mode
        super().__init__(f"Unknown {axis} position: {mode!r}")


class InvalidDirection(BouncerError):
    def __init__(self, direction):
        self.direction = direction
        super().__init__(f"Unknown direction: {direction!r}")


class ConfigError(BouncerError):
    """Raised for malformed or out-of-range configuration."""
