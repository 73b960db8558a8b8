"""Test doubles shared across unit tests."""

from collections import deque

T0 = 1_700_000_000_000


class FakeClock:
    """Scripted millisecond clock.

    Returns `current` on every read; values queued with schedule() are
    consumed one per read and become the new `current`.
    """

    def __init__(self, start_ms: int = T0) -> None:
        self.current = start_ms
        self.reads = 0
        self._script: deque[int] = deque()

    def __call__(self) -> int:
        self.reads += 1
        if self._script:
            self.current = self._script.popleft()
        return self.current

    def schedule(self, *values: int) -> None:
        self._script.extend(values)

    def set(self, value: int) -> None:
        self._script.clear()
        self.current = value
