from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """
    Port protocol for the wall clock.
    Following Ports and Adapters, the generator depends on this interface.
    """

    def now_ns(self) -> int:
        """Current instant in nanoseconds since the Unix epoch. Not guaranteed monotonic."""
        ...
