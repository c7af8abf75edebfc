from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from enigma.core.errors import RotorBindingError, SettingError
from enigma.core.machine import Machine
from enigma.core.permutation import Permutation

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    rotors: tuple[str, ...]
    setting: str
    ring: Optional[str] = None
    plugboard: str = ""

    # Settings line as written, for diagnostics only
    line: str = field(default="", compare=False)


def parse_settings(line: str, num_rotors: int) -> Settings:
    """
    Parse `* <rotor>{num_rotors} <setting> [<ring>] [<plugboard cycles>]`.

    A token after the setting that contains no "(" is the ring string;
    everything after that is plugboard cycle notation.
    """
    toks = line.split()
    if not toks or toks[0] != "*":
        raise SettingError("Settings line must start with '*'.")

    names = toks[1:1 + num_rotors]
    if len(names) < num_rotors:
        raise RotorBindingError(
            f"Settings line names {len(names)} rotors, expected {num_rotors}."
        )
    for i, name in enumerate(names):
        if name in names[i + 1:]:
            raise RotorBindingError(f"Duplicated rotor '{name}'.")

    rest = toks[1 + num_rotors:]
    if not rest:
        raise SettingError("Settings line has no rotor setting.")
    setting, rest = rest[0], rest[1:]

    ring = None
    if rest and "(" not in rest[0]:
        ring, rest = rest[0], rest[1:]

    return Settings(
        rotors=tuple(names),
        setting=setting,
        ring=ring,
        plugboard=" ".join(rest),
        line=line.strip(),
    )


def apply_settings(machine: Machine, settings: Settings) -> None:
    """Bind rotors, set them, then install ring and plugboard, in that order."""
    machine.insert_rotors(settings.rotors)
    machine.set_rotors(settings.setting)

    reflector = machine.get_rotor(0)
    if reflector is None or not reflector.reflecting():
        raise RotorBindingError("First rotor must be reflecting.")

    # Rings set by an earlier line stay on their rotors when no ring is given
    if settings.ring is not None:
        machine.insert_ring(settings.ring)

    machine.set_plugboard(Permutation(settings.plugboard, machine.alphabet))
    log.debug("configured %r", machine)


def configure(machine: Machine, line: str) -> Settings:
    settings = parse_settings(line, machine.num_rotors())
    apply_settings(machine, settings)
    return settings
