from __future__ import annotations

from .errors import ConfigurationError, InvalidCharacterError

UPPER = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

# These delimit cycles and settings lines, so an alphabet can't use them.
_RESERVED = set("()*")


class Alphabet:
    """An ordered set of distinct characters indexed 0..size()-1."""

    def __init__(self, chars: str = UPPER) -> None:
        if not chars:
            raise ConfigurationError("Alphabet must contain at least one character.")
        bad = [ch for ch in chars if ch.isspace() or ch in _RESERVED]
        if bad:
            raise ConfigurationError(f"Alphabet may not contain {bad[0]!r}.")
        if len(set(chars)) != len(chars):
            raise ConfigurationError(f"Alphabet {chars!r} repeats a character.")

        self._chars = chars
        self._index: dict[str, int] = {ch: i for i, ch in enumerate(chars)}

    @property
    def chars(self) -> str:
        return self._chars

    def size(self) -> int:
        return len(self._chars)

    def contains(self, ch: str) -> bool:
        return ch in self._index

    def to_char(self, index: int) -> str:
        if not (0 <= index < len(self._chars)):
            raise InvalidCharacterError(
                f"Index {index} out of range 0-{len(self._chars) - 1}."
            )
        return self._chars[index]

    def to_int(self, ch: str) -> int:
        try:
            return self._index[ch]
        except KeyError:
            raise InvalidCharacterError(
                f"Invalid character {ch!r} for current alphabet."
            ) from None

    def __len__(self) -> int:
        return len(self._chars)

    def __contains__(self, ch: object) -> bool:
        return ch in self._index

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"<Alphabet {self._chars!r}>"
