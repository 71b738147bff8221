from dataclasses import dataclass

from buildforge.errors import BuildError


@dataclass(frozen=True)
class ExecutionResult:
    command: str
    returncode: int
    duration_s: float

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CommandError(BuildError):
    def __init__(self, result: ExecutionResult):
        super().__init__(
            f"Command failed with exit code {result.returncode}: {result.command}"
        )
        self.result = result
