from .dwarfdump import parse_architecture_map
from .types import SymbolParseError

__all__ = ["parse_architecture_map", "SymbolParseError"]
