from __future__ import annotations

import argparse

DEFAULT_CONFIG = "buildforge.yml"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="buildforge",
        description="Archive a framework per platform and combine it into an XCFramework.",
    )

    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG,
        help="Path to the framework description file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
    )

    # run
    run = subparsers.add_parser("run", help="Run a task and its prerequisites")
    run.add_argument(
        "task",
        nargs="?",
        default="help",
        help="Task name (default: help)",
    )
    run.add_argument(
        "assignments",
        nargs="*",
        metavar="key=value",
        help="Option overrides: name, directory, verbose",
    )

    # list
    subparsers.add_parser("list", help="List tasks")

    # graph
    subparsers.add_parser("graph", help="Show task prerequisites")

    return parser
