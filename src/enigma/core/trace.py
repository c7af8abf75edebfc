from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable


@dataclass(frozen=True)
class TraceEvent:
    # Rotor settings (slots 1..n-1) after stepping, as alphabet characters
    settings: str

    source: str
    plugged: str
    result: str

    # Signal leaving each rotor, setting and ring offsets already removed:
    # forward pass (fast rotor to reflector), then backward pass (slot 1 to
    # fast rotor)
    path: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "settings": self.settings,
            "source": self.source,
            "plugged": self.plugged,
            "path": list(self.path),
            "result": self.result,
        }

    def format(self) -> str:
        """
        Render as `[AXLF] F -> F -> I -> ... -> Q`: input, after the
        plugboard, the signal leaving each rotor, then the result.
        """
        steps = [self.source, self.plugged, *self.path, self.result]
        return f"[{self.settings}] " + " -> ".join(steps)


TraceSink = Callable[[TraceEvent], None]
