from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

Action = Callable[[Any], None]


@dataclass(frozen=True)
class Task:
    name: str
    prerequisites: tuple[str, ...] = ()
    action: Action | None = field(default=None, compare=False)
    description: str | None = None

    @property
    def public(self) -> bool:
        return self.description is not None


class GraphError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class CycleError(GraphError):
    def __init__(self, cycle: list[str]):
        super().__init__("Cycle detected: " + " -> ".join(cycle))
        self.cycle = cycle


class UnknownTaskError(GraphError):
    def __init__(self, name: str, available: list[str]):
        super().__init__(
            f"Don't know how to build task '{name}'. "
            f"Available tasks: {', '.join(available)}"
        )
        self.name = name
        self.available = available
