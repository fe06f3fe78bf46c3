"""Plain-text reports of timing and size metrics and hex dumps."""

from __future__ import annotations

import math
from dataclasses import dataclass

LABEL_WIDTH = 17

Row = tuple[str, str]


def format_hex(label: str, data: bytes) -> str:
    """Return `label` followed by `data` as upper-case hex."""
    return f"{label}: {bytes(data).hex().upper()}"


def throughput(size: int, elapsed: float) -> float:
    """Return bytes per second; infinite (or NaN for no data) when no time elapsed."""
    if elapsed == 0:
        return math.inf if size else math.nan
    return size / elapsed


@dataclass(frozen=True)
class Metrics:
    """A titled block of size, timing and throughput figures, with optional hex dumps."""

    title: str
    size: int
    elapsed: float
    size_label: str = "Message Size"
    leading: tuple[Row, ...] = ()
    details: tuple[Row, ...] = ()
    trailing: tuple[Row, ...] = ()
    dumps: tuple[tuple[str, bytes], ...] = ()

    def render(self) -> str:
        """Return the report as text, starting with a blank line."""
        rows = [
            *self.leading,
            (self.size_label, f"{self.size} bytes"),
            *self.details,
            ("Execution Time", f"{self.elapsed:.6f} seconds"),
            ("Throughput", f"{throughput(self.size, self.elapsed):.2f} bytes/sec"),
            *self.trailing,
        ]
        lines = [
            "",
            f"===== {self.title} =====",
            *(f"{label:<{LABEL_WIDTH}}: {value}" for label, value in rows),
            *(format_hex(label, data) for label, data in self.dumps),
        ]
        return "\n".join(lines)