from .core import Alphabet, Machine, Permutation, RotorPool, TraceEvent
from .core.errors import EnigmaError

__version__ = "0.1.0"

__all__ = [
    "Alphabet",
    "Permutation",
    "RotorPool",
    "Machine",
    "TraceEvent",
    "EnigmaError",
    "__version__",
]
