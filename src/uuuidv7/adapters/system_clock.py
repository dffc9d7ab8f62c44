import time


class SystemClock:
    """Wall-clock adapter backed by time.time_ns(). Regressions are passed through."""

    def now_ns(self) -> int:
        return time.time_ns()
