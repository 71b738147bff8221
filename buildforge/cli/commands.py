from __future__ import annotations

import argparse
import logging
import sys
from typing import Mapping

from buildforge.config import (
    ConfigError,
    FrameworkConfig,
    load_framework,
    resolve_options,
)
from buildforge.console import Console
from buildforge.executor import Executor, RunResult
from buildforge.graph import GraphError, TaskGraph
from buildforge.process import ProcessRunner
from buildforge.tasks import BuildContext, define_tasks
from buildforge.tasks.context import Runner

from .args import build_parser

logger = logging.getLogger(__name__)


def main() -> None:
    sys.exit(run_cli())


def run_cli(
    argv: list[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    runner: Runner | None = None,
) -> int:
    parser = build_parser()
    console = Console()
    try:
        args = parser.parse_args(argv)

        match args.command:
            case "run":
                return cmd_run(args, console, environ=environ, runner=runner)
            case "list":
                return cmd_list(args, console)
            case "graph":
                return cmd_graph(args, console)
            case _:
                return 2

    except (ConfigError, GraphError) as exc:
        console.error(str(exc))
        return 2

    except KeyboardInterrupt:
        return 130


def cmd_run(
    args: argparse.Namespace,
    console: Console,
    *,
    environ: Mapping[str, str] | None = None,
    runner: Runner | None = None,
) -> int:
    task, assignments = args.task, list(args.assignments)
    # `run directory=Out` leaves the task out and asks for help
    if "=" in task:
        task, assignments = "help", [task] + assignments

    options = resolve_options(environ, assignments)
    _configure_logging(options.verbose)
    logger.debug("Using build directory: %s", options.directory)

    framework, graph = _load_graph(args.config)
    graph.get_task(task)

    if runner is None:
        runner = ProcessRunner(verbose=options.verbose, console=console)

    context = BuildContext(options, framework, runner, console)
    rr = Executor(graph, context).execute(task)
    _print_result(rr, console, verbose=options.verbose)
    return 0 if rr.ok else 1


def cmd_list(args: argparse.Namespace, console: Console) -> int:
    _, graph = _load_graph(args.config)
    for name in graph.task_names():
        console.say(name)
    return 0


def cmd_graph(args: argparse.Namespace, console: Console) -> int:
    _, graph = _load_graph(args.config)
    for task in graph:
        prerequisites = " ".join(task.prerequisites)
        console.say(f"{task.name}: {prerequisites}".rstrip())
    return 0


def _load_graph(config: str) -> tuple[FrameworkConfig, TaskGraph]:
    framework = load_framework(config)
    graph = define_tasks(TaskGraph(), framework)
    return framework, graph


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname).1s:%(message)s",
    )


def _print_result(rr: RunResult, console: Console, *, verbose: bool) -> None:
    for name in rr.order:
        if name in rr.results:
            result = rr.results[name]
            if result.ok:
                if verbose:
                    console.ok(f"{name}, {result.duration_s:.3f}s")
            else:
                console.failed(f"{name}, {result.duration_s:.3f}s")
                console.error(result.error or "task failed")
        else:
            console.skipped(name)
