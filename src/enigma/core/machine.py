from __future__ import annotations

from typing import Iterable, Optional, Sequence, Union

from .alphabet import Alphabet
from .errors import (
    ConfigurationError,
    InvalidCharacterError,
    RotorBindingError,
    SettingError,
    StateError,
)
from .permutation import Permutation
from .pool import RotorPool
from .rotors import Rotor
from .trace import TraceEvent, TraceSink
from .utils import strip_spaces


class Machine:
    """
    A rotor machine with `num_rotors` slots and `pawls` pawls.

    Slot 0 holds the reflector and slot num_rotors-1 the fast rotor. A
    Machine carries rotor state from one convert() call to the next, so one
    message must be finished before the next one starts.
    """

    def __init__(
        self,
        alphabet: Alphabet,
        num_rotors: int,
        pawls: int,
        rotors: Union[RotorPool, Iterable[Rotor]],
        *,
        trace: Optional[TraceSink] = None,
    ) -> None:
        if num_rotors < 2:
            raise ConfigurationError(f"A machine needs at least 2 rotor slots, got {num_rotors}.")
        if not (0 < pawls < num_rotors):
            raise ConfigurationError(
                f"Pawl count must satisfy 0 < pawls < {num_rotors}, got {pawls}."
            )

        self._alphabet = alphabet
        self._num_rotors = num_rotors
        self._pawls = pawls
        self._pool = rotors if isinstance(rotors, RotorPool) else RotorPool(rotors)
        self._slots: list[Optional[Rotor]] = [None] * num_rotors
        self._plugboard = Permutation("", alphabet)

        # Receives one TraceEvent per converted character when set
        self.trace: Optional[TraceSink] = trace

    # ── accessors ───────────────────────────────────────────────
    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def pool(self) -> RotorPool:
        return self._pool

    def num_rotors(self) -> int:
        return self._num_rotors

    def num_pawls(self) -> int:
        return self._pawls

    def get_rotor(self, k: int) -> Optional[Rotor]:
        """Return the rotor in slot k (0 is the reflector)."""
        if not (0 <= k < self._num_rotors):
            raise RotorBindingError(f"Rotor slot {k} out of range 0-{self._num_rotors - 1}.")
        return self._slots[k]

    def plugboard(self) -> Permutation:
        return self._plugboard

    def settings(self) -> str:
        """Current settings of slots 1..n-1 as alphabet characters."""
        return "".join(
            self._alphabet.to_char(r.setting()) if r is not None else "?"
            for r in self._slots[1:]
        )

    # ── binding (once per message group) ────────────────────────
    def insert_rotors(self, names: Sequence[str]) -> None:
        """
        Bind the rotors named `names` to the slots, names[0] to the reflector
        slot. Every name must be in the pool; repeats are not checked here.
        """
        if len(names) != self._num_rotors:
            raise RotorBindingError(
                f"Expected {self._num_rotors} rotor names, got {len(names)}."
            )
        bound = [self._pool.get(name) for name in names]
        self._slots = bound

    def _bound_slots(self) -> list[Rotor]:
        if any(r is None for r in self._slots):
            raise StateError("No rotors inserted.")
        return self._slots  # type: ignore[return-value]

    def _check_slot_string(self, value: str, what: str) -> None:
        want = self._num_rotors - 1
        if len(value) != want:
            raise SettingError(f"{what} {value!r} must be {want} characters long.")
        for ch in value:
            if ch not in self._alphabet:
                raise SettingError(f"{what} character {ch!r} not in alphabet.")

    def set_rotors(self, setting: str) -> None:
        """Set slots 1..n-1 from `setting`, leftmost first. The reflector is untouched."""
        slots = self._bound_slots()
        self._check_slot_string(setting, "Setting")
        for rotor, ch in zip(slots[1:], setting):
            rotor.set(ch)

    def insert_ring(self, ring: str) -> None:
        slots = self._bound_slots()
        self._check_slot_string(ring, "Ring")
        for rotor, ch in zip(slots[1:], ring):
            rotor.setring(ch)

    def set_plugboard(self, plugboard: Permutation) -> None:
        self._plugboard = plugboard

    # ── stepping & conversion ───────────────────────────────────
    def advance_rotors(self) -> None:
        """
        Step the machine once. The fast rotor always moves; a rotor at its
        notch moves together with its left neighbour when that neighbour
        rotates. All notches are read before any rotor moves.
        """
        if self._slots[0] is None:
            raise StateError("There must be rotors to advance.")
        slots = self._bound_slots()
        if not slots[0].reflecting():
            raise RotorBindingError("First rotor must be reflecting.")

        last = self._num_rotors - 1
        marked = [False] * self._num_rotors
        marked[last] = True
        for i in range(last, 0, -1):
            if slots[i].at_notch() and slots[i - 1].rotates():
                marked[i] = True
                marked[i - 1] = True

        for i in range(1, self._num_rotors):
            if marked[i]:
                slots[i].advance()

    def convert(self, c: int) -> int:
        """Convert index c after first stepping the machine."""
        size = self._alphabet.size()
        if not (0 <= c < size):
            raise InvalidCharacterError(f"Index {c} out of range 0-{size - 1}.")

        self.advance_rotors()
        slots = self._bound_slots()
        to_char = self._alphabet.to_char
        path: list[str] = []

        source = c
        c = self._plugboard.permute(c)
        plugged = c
        for i in range(self._num_rotors - 1, -1, -1):
            c = slots[i].convert_forward(c)
            path.append(to_char(c))
        for i in range(1, self._num_rotors):
            c = slots[i].convert_backward(c)
            path.append(to_char(c))
        c = self._plugboard.permute(c)

        if self.trace is not None:
            self.trace(
                TraceEvent(
                    settings=self.settings(),
                    source=to_char(source),
                    plugged=to_char(plugged),
                    path=tuple(path),
                    result=to_char(c),
                )
            )
        return c

    def convert_text(self, msg: str) -> str:
        """
        Convert every non-space character of msg in order. Spaces are
        dropped; the rotors keep advancing across the whole message.
        """
        out = []
        for ch in strip_spaces(msg):
            out.append(self._alphabet.to_char(self.convert(self._alphabet.to_int(ch))))
        return "".join(out)

    def __repr__(self) -> str:
        names = " ".join(r.name if r is not None else "-" for r in self._slots)
        return f"<Machine [{names}] {self.settings()}>"
