from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Optional, Union

from enigma.core.alphabet import Alphabet
from enigma.core.errors import ConfigurationError
from enigma.core.machine import Machine
from enigma.core.permutation import Permutation
from enigma.core.pool import RotorPool
from enigma.core.rotors import Rotor, make_rotor
from enigma.core.trace import TraceSink

from .common import is_cycle_token, parse_two_ints

DEFAULT_CONFIG = "default.conf"


@dataclass
class MachineConfig:
    alphabet: Alphabet
    num_rotors: int
    pawls: int
    pool: RotorPool

    def build_machine(self, *, trace: Optional[TraceSink] = None) -> Machine:
        """A new Machine over this config's alphabet and (shared) rotor pool."""
        return Machine(self.alphabet, self.num_rotors, self.pawls, self.pool, trace=trace)


def _read_rotor(toks: list[str], pos: int, alphabet: Alphabet) -> tuple[Rotor, int]:
    """Read one rotor description starting at toks[pos]; return it and the next position."""
    if pos + 1 >= len(toks):
        raise ConfigurationError("Bad rotor description: configuration file truncated.")
    name, tag = toks[pos], toks[pos + 1]
    pos += 2

    cycles = []
    while pos < len(toks) and is_cycle_token(toks[pos]):
        cycles.append(toks[pos])
        pos += 1
    if not cycles:
        raise ConfigurationError(f"Rotor {name} has no cycles.")

    perm = Permutation(" ".join(cycles), alphabet)
    return make_rotor(name, tag, perm), pos


def parse_config(text: str) -> MachineConfig:
    """
    Parse a machine description:

        ABCDEFGHIJKLMNOPQRSTUVWXYZ
        5 3
        I MQ  (AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)
        ...

    Tokens are whitespace separated, so a rotor's cycles may run over
    several lines.
    """
    toks = text.split()
    if len(toks) < 3:
        raise ConfigurationError("Configuration file truncated.")

    alphabet = Alphabet(toks[0])
    num_rotors, pawls = parse_two_ints(toks[1], toks[2])
    if num_rotors < 2:
        raise ConfigurationError(f"A machine needs at least 2 rotor slots, got {num_rotors}.")
    if pawls <= 0 or pawls >= num_rotors:
        raise ConfigurationError(
            f"Pawl count must satisfy 0 < pawls < {num_rotors}, got {pawls}."
        )

    pool = RotorPool()
    pos = 3
    while pos < len(toks):
        rotor, pos = _read_rotor(toks, pos, alphabet)
        pool.add(rotor)

    return MachineConfig(alphabet=alphabet, num_rotors=num_rotors, pawls=pawls, pool=pool)


def load_config(path: Union[str, Path]) -> MachineConfig:
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Could not open {path}.") from e
    return parse_config(text)


def load_default_config(filename: str = DEFAULT_CONFIG) -> MachineConfig:
    """Load a configuration shipped in enigma.data (Enigma I and M4 rotors by default)."""
    text = resources.files("enigma.data").joinpath(filename).read_text(encoding="utf-8")
    return parse_config(text)
