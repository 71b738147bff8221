from .duration import format_duration
from .runner import STRICT_MODE, ProcessRunner
from .types import CommandError, ExecutionResult

__all__ = [
    "ProcessRunner",
    "ExecutionResult",
    "CommandError",
    "format_duration",
    "STRICT_MODE",
]
