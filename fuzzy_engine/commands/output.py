from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class MetricLine:
    label: str
    value: Any

    def render(self, width: int = 0) -> str:
        return f"{self.label.ljust(width)} : {format_value(self.value)}"


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:.4f}"
    if value is None:
        return "-"
    return str(value)


def render_lines(lines: list[MetricLine]) -> list[str]:
    width = max((len(line.label) for line in lines), default=0)
    return [line.render(width) for line in lines]
