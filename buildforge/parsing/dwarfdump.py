from __future__ import annotations

from .types import SymbolParseError

UUID_PREFIX = "UUID:"


def parse_architecture_map(output: str) -> dict[str, str]:
    """Map each architecture in ``dwarfdump -u`` output to its build UUID.

    Each line reads ``UUID: 9EF74434-... (arm64) path/to/binary``; the
    ``UUID:`` prefix is optional. Blank lines are skipped, anything else that
    does not fit that shape is rejected.
    """
    uuids: dict[str, str] = {}

    for line_number, line in enumerate(output.splitlines(), start=1):
        tokens = line.split()
        if not tokens:
            continue

        if tokens[0] == UUID_PREFIX:
            tokens = tokens[1:]

        if len(tokens) < 3:
            raise SymbolParseError(line_number, line, "expected '<uuid> (<arch>) <path>'")

        identifier, arch_token = tokens[0], tokens[1]

        if len(arch_token) < 3 or arch_token[0] != "(" or arch_token[-1] != ")":
            raise SymbolParseError(line_number, line, "architecture must be in parentheses")

        # Remove brackets by dropping the first and last character
        arch = arch_token[1:-1]

        if arch in uuids:
            raise SymbolParseError(line_number, line, f"duplicate architecture '{arch}'")

        uuids[arch] = identifier

    return uuids
