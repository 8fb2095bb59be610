# clockspeed/utils/errors.py
from __future__ import annotations


class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided input (specs, paths, machine names).
    Should NOT print traceback.
    """


class ClockSpeedError(UserInputError):
    """Base class for every failure of the adjustment workflow."""


class SpecFormatError(ClockSpeedError):
    """Malformed clock speed batch text."""


class UnknownMachineError(ClockSpeedError):
    def __init__(self, machine_name: str, known_names: list[str]):
        self.machine_name = machine_name
        self.known_names = list(known_names)
        super().__init__(
            f'Unknown machine type "{machine_name}". '
            f"Known types: {', '.join(self.known_names)}"
        )


class NoMachinesAdjustedError(ClockSpeedError):
    """No spec in the batch matched any machine of the blueprint."""

    def __init__(self, message: str, result=None):
        # AdjustResult of the run, so callers can still show the inventory
        self.result = result
        super().__init__(message)


class BlueprintFileNotFoundError(ClockSpeedError):
    def __init__(self, kind: str, path):
        self.kind = kind
        self.path = path
        super().__init__(f"Blueprint {kind} file not found: {path}")


class BlueprintDecodeError(ClockSpeedError):
    """Raised by the bundled JSON codec on malformed documents."""


class ConfigError(UserInputError):
    """Unreadable or invalid config file, or a codec target that cannot be loaded."""
