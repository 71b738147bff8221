from __future__ import annotations

import logging
import time
from typing import Any

from buildforge.errors import BuildError
from buildforge.graph import TaskGraph

from .types import RunResult, TaskResult

logger = logging.getLogger(__name__)


class Executor:
    def __init__(self, graph: TaskGraph, context: Any = None):
        self.graph = graph
        self.context = context

    def execute(self, target: str) -> RunResult:
        order = self.graph.subgraph_order(target)
        return self._run(order)

    def _run(self, order: list[str]) -> RunResult:
        results: dict[str, TaskResult] = {}
        failed: list[str] = []
        skipped: list[str] = []
        processed: set[str] = set()

        for name in order:
            task = self.graph.get_task(name)
            logger.debug("Invoking %s", name)

            start = time.monotonic()
            try:
                if task.action is not None:
                    task.action(self.context)
            except BuildError as exc:
                duration = time.monotonic() - start
                results[name] = TaskResult(name, False, duration, str(exc))
                failed.append(name)
                processed.add(name)
                logger.debug("Task %s failed: %s", name, exc)
                break

            duration = time.monotonic() - start
            results[name] = TaskResult(name, True, duration)
            processed.add(name)

        for name in order:
            if name not in processed:
                skipped.append(name)

        return RunResult(order, results, failed, skipped)
