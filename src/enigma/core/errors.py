from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every error raised by the simulator."""


class ConfigurationError(EnigmaError):
    """Malformed alphabet, rotor description, or rotor/pawl counts."""


class RotorBindingError(EnigmaError):
    """Unknown rotor name, wrong slot count, or no reflector in slot 0."""


class SettingError(EnigmaError):
    """Setting or ring string of the wrong length or outside the alphabet."""


class PermutationError(EnigmaError):
    """Malformed cycle notation or cycle characters outside the alphabet."""


class StateError(EnigmaError):
    """Stepping or converting before the required rotors are bound."""


class InvalidCharacterError(EnigmaError):
    """A character or index that does not belong to the alphabet."""
