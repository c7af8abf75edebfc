from __future__ import annotations

from typing import Iterable, Iterator

from enigma.core.machine import Machine
from enigma.core.utils import group_text

from .common import message_lines
from .settings import configure


def process(machine: Machine, lines: Iterable[str], *, group: int = 5) -> Iterator[str]:
    """
    Run a stream of settings lines and messages through `machine`.

    Settings lines (starting with "*") reconfigure the machine and yield
    nothing. An empty line yields an empty line; every other line yields its
    conversion in groups of `group` characters (nothing if it held only
    spaces). A message before any settings line raises StateError.
    """
    for line in message_lines(lines):
        if line.startswith("*"):
            configure(machine, line)
            continue
        if not line:
            yield ""
            continue

        converted = machine.convert_text(line)
        if converted:
            yield group_text(converted, group) if group > 0 else converted
