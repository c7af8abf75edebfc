from __future__ import annotations

import re

from .alphabet import Alphabet
from .errors import InvalidCharacterError, PermutationError

_WS_RE = re.compile(r"\s+")
_CYCLES_RE = re.compile(r"(?:\([^()]+\))*")
_CYCLE_RE = re.compile(r"\(([^()]+)\)")


def parse_cycles(cycles: str, alphabet: Alphabet) -> tuple[str, ...]:
    """
    Parse cycle notation such as "(BACD) (EF) (GH)" into ("BACD", "EF", "GH").

    Whitespace is ignored everywhere. Every character must belong to
    `alphabet` and may appear in at most one cycle.
    """
    compact = _WS_RE.sub("", cycles)
    if not _CYCLES_RE.fullmatch(compact):
        raise PermutationError(f"Malformed cycle notation: {cycles.strip()!r}")

    out = _CYCLE_RE.findall(compact)
    seen: set[str] = set()
    for cycle in out:
        for ch in cycle:
            if ch not in alphabet:
                raise PermutationError(f"Cycle character {ch!r} not in alphabet.")
            if ch in seen:
                raise PermutationError(f"Character {ch!r} appears twice in cycle notation.")
            seen.add(ch)
    return tuple(out)


class Permutation:
    """
    A permutation of the indices of an alphabet, stored as disjoint cycles.

    Characters left out of every cycle map to themselves, but they are not
    recorded as cycles of their own.
    """

    def __init__(self, cycles: str, alphabet: Alphabet) -> None:
        self._alphabet = alphabet
        self._cycles = parse_cycles(cycles, alphabet)

        # index -> index lookup tables built once from the cycles
        self._fwd: dict[int, int] = {}
        self._rev: dict[int, int] = {}
        for cycle in self._cycles:
            idx = [alphabet.to_int(ch) for ch in cycle]
            for j, i in enumerate(idx):
                nxt = idx[(j + 1) % len(idx)]
                self._fwd[i] = nxt
                self._rev[nxt] = i

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def cycles(self) -> tuple[str, ...]:
        return self._cycles

    def size(self) -> int:
        return self._alphabet.size()

    def _check(self, p: int) -> None:
        if not (0 <= p < self.size()):
            raise InvalidCharacterError(f"Index {p} out of range 0-{self.size() - 1}.")

    def permute(self, p: int) -> int:
        """Index of the character following p's character in its cycle."""
        self._check(p)
        return self._fwd.get(p, p)

    def invert(self, c: int) -> int:
        """Index of the character preceding c's character in its cycle."""
        self._check(c)
        return self._rev.get(c, c)

    def permute_char(self, ch: str) -> str:
        return self._alphabet.to_char(self.permute(self._alphabet.to_int(ch)))

    def invert_char(self, ch: str) -> str:
        return self._alphabet.to_char(self.invert(self._alphabet.to_int(ch)))

    def derangement(self) -> bool:
        # Only explicit one-character cycles count as fixed points here.
        return all(len(cycle) != 1 for cycle in self._cycles)

    def __str__(self) -> str:
        return " ".join(f"({cycle})" for cycle in self._cycles)

    def __repr__(self) -> str:
        return f"<Permutation {self}>"
