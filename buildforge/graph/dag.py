from __future__ import annotations

from enum import Enum, auto
from typing import Iterable, Iterator

from .types import Action, CycleError, GraphError, Task, UnknownTaskError


class _Visit(Enum):
    UNVISITED = auto()
    VISITING = auto()
    VISITED = auto()


class TaskGraph:
    def __init__(self) -> None:
        self._tasks: dict[str, Task] = {}

    def __iter__(self) -> Iterator[Task]:
        for name in sorted(self._tasks):
            yield self._tasks[name]

    def define(
        self,
        name: str,
        prerequisites: Iterable[str] = (),
        action: Action | None = None,
        *,
        description: str | None = None,
    ) -> Task:
        if name in self._tasks:
            raise GraphError(f"Task '{name}' is already defined")

        # Repeated prerequisites collapse onto their first position
        deps: list[str] = []
        for dep in prerequisites:
            if dep == name:
                raise GraphError(f"Task '{name}' cannot depend on itself")
            if dep not in deps:
                deps.append(dep)

        task = Task(name, tuple(deps), action, description)
        self._tasks[name] = task
        return task

    def has_task(self, name: str) -> bool:
        return name in self._tasks

    def get_task(self, name: str) -> Task:
        if not self.has_task(name):
            raise UnknownTaskError(name, self.task_names())

        return self._tasks[name]

    def task_names(self) -> list[str]:
        return sorted(self._tasks)

    def public_tasks(self) -> list[Task]:
        return [task for task in self if task.public]

    def validate(self) -> None:
        self.topo_order()

    def topo_order(self) -> list[str]:
        return self._toposort(self.task_names())

    def subgraph_order(self, target: str) -> list[str]:
        self.get_task(target)
        return self._toposort([target])

    def _toposort(self, roots: list[str]) -> list[str]:
        state: dict[str, _Visit] = {}
        out: list[str] = []
        stack: list[str] = []
        pos: dict[str, int] = {}

        def visit(name: str, parent: str | None) -> None:
            if name not in self._tasks:
                raise GraphError(f"Task '{parent}' has unknown prerequisite '{name}'")

            current = state.get(name, _Visit.UNVISITED)
            if current == _Visit.VISITING:
                start = pos[name]
                raise CycleError(stack[start:] + [name])
            if current == _Visit.VISITED:
                return

            state[name] = _Visit.VISITING
            pos[name] = len(stack)
            stack.append(name)

            for dep in self._tasks[name].prerequisites:
                visit(dep, name)

            stack.pop()
            pos.pop(name)
            state[name] = _Visit.VISITED
            out.append(name)

        for name in roots:
            visit(name, None)

        return out
