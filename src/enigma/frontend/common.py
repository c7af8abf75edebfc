from __future__ import annotations

from typing import Iterable, Iterator

from enigma.core.errors import ConfigurationError


def is_cycle_token(token: str) -> bool:
    """A whitespace-free token like "(AB)" or "(AVOL)(BZK)"."""
    return len(token) >= 2 and token.startswith("(") and token.endswith(")")


def message_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines with their line terminators removed."""
    for raw in lines:
        yield raw.rstrip("\r\n")


def parse_two_ints(first: str, second: str) -> tuple[int, int]:
    """
    Parse the rotor and pawl counts of a configuration file.
    Raises ConfigurationError if either is not an integer.
    """
    try:
        return int(first), int(second)
    except ValueError as e:
        raise ConfigurationError(
            f"Expected rotor and pawl counts, got {first!r} {second!r}."
        ) from e
