from .executor import Executor
from .types import RunResult, TaskResult

__all__ = ["Executor", "RunResult", "TaskResult"]
