from __future__ import annotations

import logging
from pathlib import Path

from buildforge.config import FrameworkConfig, PlatformVariant
from buildforge.errors import require
from buildforge.graph import TaskGraph
from buildforge.parsing import parse_architecture_map

from . import commands
from .context import BuildContext

logger = logging.getLogger(__name__)

HELP_COLUMN = 20


def compile_task_name(variant: PlatformVariant) -> str:
    return f"compile:{variant.key}"


def define_tasks(graph: TaskGraph, framework: FrameworkConfig) -> TaskGraph:
    """Register the archive-and-package task set for ``framework`` on ``graph``."""

    graph.define("clean", action=clean)
    graph.define("prepare", action=prepare)

    for variant in framework.variants:
        graph.define(
            compile_task_name(variant),
            ["prepare"],
            _archive_action(variant),
            description=variant.description
            or f"Archive {framework.name} ({variant.key})",
        )

    graph.define(
        "compile",
        ["clean"] + [compile_task_name(variant) for variant in framework.variants],
        package,
        description=f"Create the {framework.name} XCFramework",
    )

    graph.define("help", action=_help_action(graph), description="Show help")

    graph.validate()
    return graph


def clean(ctx: BuildContext) -> None:
    ctx.console.tell("Cleaning")
    ctx.runner.run(commands.remove_directory(ctx.directory))


def prepare(ctx: BuildContext) -> None:
    ctx.console.tell("Preparing")
    ctx.runner.run(commands.make_directory(ctx.directory))


def _archive_action(variant: PlatformVariant):
    def archive(ctx: BuildContext) -> None:
        ctx.console.tell(f"Archiving {ctx.product_name} ({variant.key})")
        command = commands.archive(ctx.framework, variant, ctx.archive_path(variant))
        ctx.runner.run(command, quiet=True, timed=True)

    return archive


def package(ctx: BuildContext) -> None:
    ctx.console.tell(f"Creating the {ctx.product_name} XCFramework")

    slices = []
    for variant in ctx.framework.variants:
        debug_symbols = [ctx.dsym_path(variant)]
        debug_symbols += symbol_maps(ctx, variant)
        slices.append((ctx.framework_path(variant), debug_symbols))

    ctx.runner.run(commands.create_xcframework(slices, ctx.output_path))


def symbol_maps(ctx: BuildContext, variant: PlatformVariant) -> list[Path]:
    if not variant.symbol_maps:
        return []

    binary = ctx.binary_path(variant)
    uuids = parse_architecture_map(ctx.runner.capture(commands.dump_uuids(binary)))
    logger.debug("UUIDs for %s: %s", binary, uuids)

    paths = []
    for arch in variant.symbol_maps:
        require(arch in uuids, f"No UUID for architecture '{arch}' in {binary}")
        paths.append(ctx.symbol_map_path(variant, uuids[arch]))

    return paths


def _help_action(graph: TaskGraph):
    def show_help(ctx: BuildContext) -> None:
        for task in graph.public_tasks():
            ctx.console.say(f"buildforge run {task.name:<{HELP_COLUMN}} # {task.description}")

    return show_help
