from __future__ import annotations

import sys
from typing import TextIO


class Colors:
    BOLD = "\033[0;1m"
    RESET = "\033[0m"
    RED = "\033[0;31m"
    GREEN = "\033[0;32m"
    YELLOW = "\033[0;33m"
    BLUE = "\033[0;34m"
    WHITE = "\033[0;37m"


class Console:
    """Progress output for humans. Colours are only emitted on a terminal."""

    def __init__(self, stream: TextIO | None = None, err: TextIO | None = None):
        self._stream = stream
        self._err = err

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so redirected sys.stdout is honoured
        return self._stream or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._err or sys.stderr

    def paint(self, color: str, text: str, *, stream: TextIO | None = None) -> str:
        target = stream or self.stream
        isatty = getattr(target, "isatty", None)
        if isatty is not None and isatty():
            return f"{color}{text}{Colors.RESET}"
        return text

    def say(self, message: str) -> None:
        print(message, file=self.stream, flush=True)

    def tell(self, message: str) -> None:
        arrow = self.paint(Colors.BLUE, "==>")
        print(f"{arrow} {self.paint(Colors.WHITE, message)}", file=self.stream, flush=True)

    def ok(self, message: str) -> None:
        self.say(f"{self.paint(Colors.GREEN, 'OK')} {message}")

    def skipped(self, message: str) -> None:
        self.say(f"{self.paint(Colors.YELLOW, 'SKIP')} {message}")

    def failed(self, message: str) -> None:
        self.say(f"{self.paint(Colors.RED, 'FAIL')} {message}")

    def error(self, message: str) -> None:
        label = self.paint(Colors.RED, "Error:", stream=self.err)
        print(f"{label} {message}", file=self.err, flush=True)
