import os
from pathlib import Path
from typing import Iterable, Mapping

from .types import BuildOptions, ConfigError

DEFAULT_DIRECTORY = "Build"
OPTION_KEYS = ("name", "directory", "verbose")
TRUTHY = {"1", "true", "yes", "on"}


def resolve_options(
    environ: Mapping[str, str] | None = None,
    assignments: Iterable[str] = (),
) -> BuildOptions:
    """Build options from ``name``/``directory``/``verbose`` variables.

    ``key=value`` assignments from the command line win over the environment.
    """
    if environ is None:
        environ = os.environ

    values = {key: environ[key] for key in OPTION_KEYS if key in environ}
    values.update(parse_assignments(assignments))

    name = values.get("name", "")
    raw_directory = values.get("directory") or DEFAULT_DIRECTORY
    directory = Path(os.path.abspath(os.path.expanduser(raw_directory)))
    verbose = values.get("verbose", "").strip().lower() in TRUTHY

    return BuildOptions(name=name, directory=directory, verbose=verbose)


def parse_assignments(assignments: Iterable[str]) -> dict[str, str]:
    parsed = {}

    for item in assignments:
        key, sep, value = item.partition("=")
        key = key.strip()

        if not sep:
            raise ConfigError(f"Expected key=value, got '{item}'")

        if key not in OPTION_KEYS:
            raise ConfigError(
                f"Unknown option '{key}'. Expected one of: {', '.join(OPTION_KEYS)}"
            )

        parsed[key] = value

    return parsed
