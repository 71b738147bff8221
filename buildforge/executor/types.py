from dataclasses import dataclass


@dataclass(frozen=True)
class TaskResult:
    task: str
    ok: bool
    duration_s: float
    error: str | None = None


@dataclass(frozen=True)
class RunResult:
    order: list[str]
    results: dict[str, TaskResult]
    failed: list[str]
    skipped: list[str]

    @property
    def ok(self) -> bool:
        return not self.failed
