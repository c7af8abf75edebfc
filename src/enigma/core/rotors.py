from __future__ import annotations

from typing import Optional, Union

from .alphabet import Alphabet
from .errors import ConfigurationError, InvalidCharacterError
from .permutation import Permutation
from .utils import wrap


class Rotor:
    """
    A rotor named `name` implementing `perm` in its 0 setting.

    The base class neither rotates nor reflects; subclasses switch those
    capabilities on.
    """

    def __init__(self, name: str, perm: Permutation) -> None:
        self._name = name
        self._permutation = perm
        self._setting = 0
        self._ring: Optional[int] = None

    # ── identity ────────────────────────────────────────────────
    @property
    def name(self) -> str:
        return self._name

    @property
    def permutation(self) -> Permutation:
        return self._permutation

    @property
    def alphabet(self) -> Alphabet:
        return self._permutation.alphabet

    def size(self) -> int:
        return self._permutation.size()

    # ── capabilities ────────────────────────────────────────────
    def rotates(self) -> bool:
        return False

    def reflecting(self) -> bool:
        return False

    def notches(self) -> str:
        return ""

    def at_notch(self) -> bool:
        return False

    def advance(self) -> None:
        pass

    def type_tag(self) -> str:
        return "N"

    # ── setting & ring ──────────────────────────────────────────
    def setting(self) -> int:
        return self._setting

    def set(self, posn: Union[int, str]) -> None:
        """Set the rotor to an index or to the index of a character."""
        if isinstance(posn, str):
            self._setting = self.alphabet.to_int(posn)
            return
        if not (0 <= posn < self.size()):
            raise InvalidCharacterError(f"Setting {posn} out of range 0-{self.size() - 1}.")
        self._setting = posn

    def ring(self) -> Optional[int]:
        return self._ring

    def setring(self, ch: str) -> None:
        self._ring = self.alphabet.to_int(ch)

    # ── signal paths ────────────────────────────────────────────
    def _offset(self) -> int:
        return self._setting - (self._ring or 0)

    def _check(self, p: int) -> None:
        if not (0 <= p < self.size()):
            raise InvalidCharacterError(f"Index {p} out of range 0-{self.size() - 1}.")

    def convert_forward(self, p: int) -> int:
        self._check(p)
        n = self.size()
        shift = self._offset()
        return wrap(self._permutation.permute(wrap(p + shift, n)) - shift, n)

    def convert_backward(self, e: int) -> int:
        self._check(e)
        n = self.size()
        shift = self._offset()
        return wrap(self._permutation.invert(wrap(e + shift, n)) - shift, n)

    def __repr__(self) -> str:
        ring = "" if self._ring is None else f" ring={self._ring}"
        return f"<{type(self).__name__} {self._name} pos={self._setting}{ring}>"


class FixedRotor(Rotor):
    """A rotor with no ratchet: it never moves once set."""


class Reflector(Rotor):
    """A fixed rotor that folds the signal back through the stack."""

    def reflecting(self) -> bool:
        return True

    def type_tag(self) -> str:
        return "R"


class MovingRotor(Rotor):
    """A rotor with a ratchet, stepping the rotor to its left at its notches."""

    def __init__(self, name: str, perm: Permutation, notches: str) -> None:
        super().__init__(name, perm)
        missing = [ch for ch in notches if ch not in perm.alphabet]
        if missing:
            raise ConfigurationError(
                f"Rotor {name}: notch {missing[0]!r} not in alphabet."
            )
        self._notches = notches
        self._notch_idx = frozenset(perm.alphabet.to_int(ch) for ch in notches)

    def rotates(self) -> bool:
        return True

    def notches(self) -> str:
        return self._notches

    def at_notch(self) -> bool:
        return self.setting() in self._notch_idx

    def advance(self) -> None:
        self.set(wrap(self.setting() + 1, self.size()))

    def type_tag(self) -> str:
        return "M" + self._notches


def make_rotor(name: str, tag: str, perm: Permutation) -> Rotor:
    """Build a rotor from its type tag: M<notches>, N or R."""
    if not tag:
        raise ConfigurationError(f"Rotor {name}: empty type tag.")
    kind = tag[0]
    if kind == "M":
        return MovingRotor(name, perm, tag[1:])
    if kind == "N":
        return FixedRotor(name, perm)
    if kind == "R":
        return Reflector(name, perm)
    raise ConfigurationError(
        f"Rotor {name}: type tag {tag!r} must start with M, N or R."
    )
