from .alphabet import Alphabet
from .errors import (
    ConfigurationError,
    EnigmaError,
    InvalidCharacterError,
    PermutationError,
    RotorBindingError,
    SettingError,
    StateError,
)
from .machine import Machine
from .permutation import Permutation
from .pool import RotorPool
from .rotors import FixedRotor, MovingRotor, Reflector, Rotor, make_rotor
from .trace import TraceEvent

__all__ = [
    "Alphabet",
    "Permutation",
    "Rotor",
    "FixedRotor",
    "MovingRotor",
    "Reflector",
    "make_rotor",
    "RotorPool",
    "Machine",
    "TraceEvent",
    "EnigmaError",
    "ConfigurationError",
    "RotorBindingError",
    "SettingError",
    "PermutationError",
    "StateError",
    "InvalidCharacterError",
]
