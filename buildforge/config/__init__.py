from .loader import load_framework
from .options import resolve_options
from .types import (
    BuildOptions,
    ConfigError,
    FrameworkConfig,
    PlatformVariant,
    UnsupportedConfigFormatError,
)

__all__ = [
    "load_framework",
    "resolve_options",
    "BuildOptions",
    "FrameworkConfig",
    "PlatformVariant",
    "ConfigError",
    "UnsupportedConfigFormatError",
]
