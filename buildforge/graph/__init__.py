from .dag import TaskGraph
from .types import CycleError, GraphError, Task, UnknownTaskError

__all__ = ["TaskGraph", "Task", "GraphError", "CycleError", "UnknownTaskError"]
