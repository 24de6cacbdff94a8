"""Non-blocking single-key input from a terminal or any text stream."""

from __future__ import annotations

import os
import select
import sys
from typing import IO

try:
    import termios
except ImportError:  # pragma: no cover - platforms without termios
    termios = None  # type: ignore[assignment]


class KeyboardInput:
    """Reads single key presses without waiting for Enter.

    Used as a context manager on a terminal, it switches off canonical mode
    and echo on entry and restores the saved terminal settings on exit.
    Streams without a file descriptor are read one character at a time.
    """

    def __init__(self, stream: IO[str] | None = None) -> None:
        self.stream = stream if stream is not None else sys.stdin
        self._fd = self._fileno()
        self._saved: list | None = None

    def _fileno(self) -> int | None:
        try:
            return self.stream.fileno()
        except (AttributeError, OSError, ValueError):
            return None

    def __enter__(self) -> KeyboardInput:
        if termios is not None and self._fd is not None and os.isatty(self._fd):
            self._saved = termios.tcgetattr(self._fd)
            raw = termios.tcgetattr(self._fd)
            raw[3] &= ~(termios.ICANON | termios.ECHO)
            termios.tcsetattr(self._fd, termios.TCSANOW, raw)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._saved is not None and termios is not None and self._fd is not None:
            termios.tcsetattr(self._fd, termios.TCSANOW, self._saved)
            self._saved = None

    def read_key(self) -> str | None:
        """Return the next pending character, or None when nothing is waiting."""
        if self._fd is None:
            return self.stream.read(1) or None
        ready, _, _ = select.select([self._fd], [], [], 0)
        if not ready:
            return None
        data = os.read(self._fd, 1)
        if not data:
            return None
        return data.decode("latin-1")


def key_to_controls(key: str | None) -> tuple[float | None, float | None]:
    """Map a key to ``(throttle, steering)``; None means leave that control unchanged.

    ``w``/``s`` accelerate and brake, ``a``/``d`` steer fully left and right,
    in either case.
    """
    if key is None:
        return None, None
    lowered = key.lower()
    throttle = {"w": 1.0, "s": -1.0}.get(lowered)
    steering = {"a": -1.0, "d": 1.0}.get(lowered)
    return throttle, steering