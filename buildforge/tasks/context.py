from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from buildforge.config import BuildOptions, FrameworkConfig, PlatformVariant
from buildforge.console import Console
from buildforge.process import ExecutionResult


class Runner(Protocol):
    def run(
        self,
        command: str,
        *,
        quiet: bool = False,
        timed: bool = False,
        survive: bool = False,
    ) -> ExecutionResult: ...

    def capture(self, command: str) -> str: ...


@dataclass
class BuildContext:
    """Everything a task action needs: options, framework layout and I/O."""

    options: BuildOptions
    framework: FrameworkConfig
    runner: Runner
    console: Console

    @property
    def product_name(self) -> str:
        return self.options.name or self.framework.name

    @property
    def directory(self) -> Path:
        return self.options.directory

    @property
    def archives_directory(self) -> Path:
        return self.directory / "Xcode" / "Archives"

    def archive_path(self, variant: PlatformVariant) -> Path:
        return self.archives_directory / (
            f"{self.product_name}.framework-{variant.slice}.xcarchive"
        )

    def framework_path(self, variant: PlatformVariant) -> Path:
        return (
            self.archive_path(variant)
            / "Products"
            / "Library"
            / "Frameworks"
            / f"{self.product_name}.framework"
        )

    def binary_path(self, variant: PlatformVariant) -> Path:
        return self.framework_path(variant) / self.product_name

    def dsym_path(self, variant: PlatformVariant) -> Path:
        return self.archive_path(variant) / "dSYMs" / f"{self.product_name}.framework.dSYM"

    def symbol_map_path(self, variant: PlatformVariant, uuid: str) -> Path:
        return self.archive_path(variant) / "BCSymbolMaps" / f"{uuid}.bcsymbolmap"

    @property
    def output_path(self) -> Path:
        return self.directory / f"{self.product_name}.xcframework"
