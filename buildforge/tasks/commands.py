from __future__ import annotations

import shlex
from pathlib import Path
from typing import Iterable

from buildforge.config import FrameworkConfig, PlatformVariant


def quote(path: str | Path) -> str:
    return shlex.quote(str(path))


def remove_directory(directory: Path) -> str:
    return f"rm -rf {quote(directory)}"


def make_directory(directory: Path) -> str:
    return f"mkdir -p {quote(directory)}"


def archive(
    framework: FrameworkConfig, variant: PlatformVariant, archive_path: Path
) -> str:
    parts = [
        "xcrun xcodebuild",
        f"-destination {quote(variant.destination)}",
        f"-archivePath {quote(archive_path)}",
    ]
    if framework.project:
        parts.append(f"-project {quote(framework.project)}")
    parts += [
        f"-configuration {quote(framework.configuration)}",
        f"-scheme {quote(framework.scheme)}",
        "archive",
    ]
    parts += [f"{key}={quote(value)}" for key, value in framework.build_settings.items()]
    return " ".join(parts)


def dump_uuids(binary: Path) -> str:
    return f"dwarfdump -u {quote(binary)}"


def create_xcframework(
    slices: Iterable[tuple[Path, Iterable[Path]]], output: Path
) -> str:
    """``slices`` pairs each framework bundle with its debug-symbol files."""
    parts = ["xcodebuild -create-xcframework"]
    for framework_path, debug_symbols in slices:
        parts.append(f"-framework {quote(framework_path)}")
        parts += [f"-debug-symbols {quote(symbols)}" for symbols in debug_symbols]
    parts.append(f"-output {quote(output)}")
    return " ".join(parts)
