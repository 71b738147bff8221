import json
import tomllib
from pathlib import Path
from typing import Any, Mapping

import yaml

from .types import (
    DEFAULT_BUILD_SETTINGS,
    ConfigError,
    FrameworkConfig,
    PlatformVariant,
    UnsupportedConfigFormatError,
)

DEFAULT_CONFIGURATION = "Release"


def load_framework(path: str | Path) -> FrameworkConfig:
    pure_path = Path(path).expanduser().resolve()

    if not pure_path.exists():
        raise ConfigError(f"Config file not found: {pure_path}")

    if not pure_path.is_file():
        raise ConfigError(f"Config path is not a file: {pure_path}")

    fmt = _detect_format(pure_path)
    raw_file = _parse_file(pure_path, fmt)
    return build_framework_config(raw_file)


def _detect_format(path: Path) -> str:
    fmt = path.suffix
    match fmt:
        case ".yaml" | ".yml":
            return "yaml"
        case ".toml":
            return "toml"
        case ".json":
            return "json"
        case _:
            raise UnsupportedConfigFormatError(
                f"Non supported file extension: {fmt}\n Expected format: .yml/.yaml, .toml, .json"
            )


def _parse_file(path: Path, fmt: str) -> Mapping[str, Any]:
    match fmt:
        case "yaml":
            return _parse_yaml(path)
        case "toml":
            return _parse_toml(path)
        case "json":
            return _parse_json(path)
        case _:
            raise AssertionError("Unreachable")


def _parse_yaml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"{path}: invalid YAML") from exc

    return _require_mapping(path, "YAML", raw_file)


def _parse_toml(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"{path}: invalid TOML") from exc

    return _require_mapping(path, "TOML", raw_file)


def _parse_json(path: Path) -> Mapping[str, Any]:
    try:
        raw_file = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"{path}: invalid JSON") from exc

    return _require_mapping(path, "JSON", raw_file)


def _require_mapping(path: Path, fmt: str, raw_file: Any) -> Mapping[str, Any]:
    if not isinstance(raw_file, Mapping):
        raise ConfigError(
            f"{path}: {fmt} parsed successfully but top-level value is not an object: {type(raw_file)}"
        )

    return raw_file


def build_framework_config(raw: Mapping[str, Any]) -> FrameworkConfig:
    for key in raw.keys():
        if key not in {"framework", "variants"}:
            raise ConfigError(f"Can't process top-level field: {key}")

    if "framework" not in raw:
        raise ConfigError("Missing 'framework' field")

    if not isinstance(raw["framework"], Mapping):
        raise ConfigError(f"'framework' must be a mapping, got {type(raw['framework'])}")

    if "variants" not in raw:
        raise ConfigError("Missing 'variants' field")

    if not isinstance(raw["variants"], Mapping):
        raise ConfigError(f"'variants' must be a mapping, got {type(raw['variants'])}")

    if len(raw["variants"]) < 1:
        raise ConfigError("There must be at least one variant in the config file")

    variants = []
    seen = set()

    for key, fields in raw["variants"].items():
        if not isinstance(key, str):
            raise ConfigError(f"Variant key must be a string, got {type(key)}")

        if not isinstance(fields, Mapping):
            raise ConfigError(f"{key} must be a mapping")

        key_norm = key.strip()

        if len(key_norm) < 1:
            raise ConfigError("A variant key can't be empty")

        if key_norm in seen:
            raise ConfigError(f"Duplicate variant key after normalization: {key_norm}")

        variants.append(_build_variant(key_norm, fields))
        seen.add(key_norm)

    return _build_framework(raw["framework"], variants)


def _build_framework(
    fields: Mapping[str, Any], variants: list[PlatformVariant]
) -> FrameworkConfig:
    keys = {"name", "scheme", "configuration", "project", "build_settings"}

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"framework: Can't process: {field}")

    if "name" not in fields:
        raise ConfigError("framework: missing 'name'")

    name = _string(fields["name"], "framework.name")
    scheme = _string(fields.get("scheme", name), "framework.scheme")
    configuration = _string(
        fields.get("configuration", DEFAULT_CONFIGURATION), "framework.configuration"
    )
    project = None
    build_settings = dict(DEFAULT_BUILD_SETTINGS)

    if "project" in fields:
        project = _string(fields["project"], "framework.project")

    if "build_settings" in fields:
        if not isinstance(fields["build_settings"], Mapping):
            raise ConfigError("framework: build_settings should be a mapping")

        for key, item in fields["build_settings"].items():
            if not isinstance(key, str) or len(key.strip()) < 1:
                raise ConfigError(f"framework: build setting {key!r} should be a non-empty string")

            # YAML reads bare YES/NO as booleans
            if isinstance(item, bool):
                item = "YES" if item else "NO"

            if not isinstance(item, str):
                raise ConfigError(f"framework: build setting {key} should be a string")

            build_settings[key.strip()] = item

    return FrameworkConfig(
        name=name,
        scheme=scheme,
        configuration=configuration,
        variants=variants,
        project=project,
        build_settings=build_settings,
    )


def _build_variant(key: str, fields: Mapping[str, Any]) -> PlatformVariant:
    keys = {"destination", "slice", "description", "symbol_maps"}
    description = None
    symbol_maps = []

    for field in fields.keys():
        if field not in keys:
            raise ConfigError(f"{key}: Can't process: {field}")

    for required in ("destination", "slice"):
        if required not in fields:
            raise ConfigError(f"{key}: missing '{required}'")

    destination = _string(fields["destination"], f"{key}.destination")
    slice_name = _string(fields["slice"], f"{key}.slice")

    if "description" in fields:
        description = _string(fields["description"], f"{key}.description")

    if "symbol_maps" in fields:
        if not isinstance(fields["symbol_maps"], list):
            raise ConfigError(f"{key}: symbol_maps should be in a list.")

        for item in fields["symbol_maps"]:
            arch = _string(item, f"{key}.symbol_maps")

            if arch in symbol_maps:
                continue

            symbol_maps.append(arch)

    return PlatformVariant(key, destination, slice_name, description, symbol_maps)


def _string(value: Any, where: str) -> str:
    if not isinstance(value, str):
        raise ConfigError(f"{where}: should be a string, got {type(value)}")

    if len(value.strip()) < 1:
        raise ConfigError(f"{where}: can't be empty")

    return value.strip()
