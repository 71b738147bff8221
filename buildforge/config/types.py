from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_BUILD_SETTINGS = {"SKIP_INSTALL": "NO"}


@dataclass(frozen=True)
class BuildOptions:
    name: str
    directory: Path
    verbose: bool


@dataclass
class PlatformVariant:
    key: str
    destination: str
    slice: str
    description: str | None = None
    symbol_maps: list[str] = field(default_factory=list)


@dataclass
class FrameworkConfig:
    name: str
    scheme: str
    configuration: str
    variants: list[PlatformVariant]
    project: str | None = None
    build_settings: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_BUILD_SETTINGS)
    )

    def has_variant(self, key: str) -> bool:
        return any(variant.key == key for variant in self.variants)

    def get_variant(self, key: str) -> PlatformVariant:
        for variant in self.variants:
            if variant.key == key:
                return variant

        raise KeyError(key)

    def variant_keys(self) -> list[str]:
        return [variant.key for variant in self.variants]


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
