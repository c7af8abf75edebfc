from __future__ import annotations

from typing import Iterable, Iterator

from .errors import ConfigurationError, RotorBindingError
from .rotors import Rotor


class RotorPool:
    """
    The rotors available to a machine, looked up by name.

    Machines hold references into the pool, never copies, so a rotor's
    setting changes are visible through every slot that binds it.
    """

    def __init__(self, rotors: Iterable[Rotor] = ()) -> None:
        self._rotors: dict[str, Rotor] = {}
        for rotor in rotors:
            self.add(rotor)

    def add(self, rotor: Rotor) -> None:
        key = rotor.name.strip()
        if not key:
            raise ConfigurationError("Rotor must have a non-empty name.")
        if key in self._rotors:
            raise ConfigurationError(f"Duplicate rotor name '{key}'.")
        self._rotors[key] = rotor

    def get(self, name: str) -> Rotor:
        try:
            return self._rotors[name]
        except KeyError:
            raise RotorBindingError(
                f"Unmatched rotor '{name}'. Available: {', '.join(self.names())}"
            ) from None

    def names(self) -> list[str]:
        return list(self._rotors)

    def __contains__(self, name: object) -> bool:
        return name in self._rotors

    def __iter__(self) -> Iterator[Rotor]:
        return iter(self._rotors.values())

    def __len__(self) -> int:
        return len(self._rotors)
