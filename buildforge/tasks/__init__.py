from .context import BuildContext
from .xcframework import compile_task_name, define_tasks

__all__ = ["BuildContext", "define_tasks", "compile_task_name"]
