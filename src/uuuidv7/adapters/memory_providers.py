import threading
from typing import List


class FixedClock:
    """
    In-memory clock pinned to a single instant.
    Used for development and testing.
    """

    def __init__(self, instant_ns: int) -> None:
        self.instant_ns = instant_ns

    def now_ns(self) -> int:
        return self.instant_ns


class SteppingClock:
    """
    In-memory clock that advances by a fixed step on every read.
    Used for development and testing.
    """

    def __init__(self, start_ns: int, step_ns: int = 1_000) -> None:
        if step_ns < 0:
            raise ValueError("step_ns must be non-negative")
        self._next = start_ns
        self.step_ns = step_ns
        self._lock = threading.Lock()

    def now_ns(self) -> int:
        with self._lock:
            current = self._next
            self._next += self.step_ns
        return current


class FixedEntropy:
    """
    Entropy source that repeats a fixed byte pattern.
    Used for development and testing.
    """

    def __init__(self, pattern: bytes = b"\x00") -> None:
        if not pattern:
            raise ValueError("pattern must not be empty")
        self.pattern = pattern
        # Requested sizes, in call order
        self.calls: List[int] = []

    def token_bytes(self, n: int) -> bytes:
        self.calls.append(n)
        repeats = -(-n // len(self.pattern))
        return (self.pattern * repeats)[:n]
