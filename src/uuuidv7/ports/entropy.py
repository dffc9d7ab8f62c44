from typing import Protocol, runtime_checkable


@runtime_checkable
class EntropySource(Protocol):
    """Port protocol for random bytes."""

    def token_bytes(self, n: int) -> bytes:
        """Return n cryptographically strong random bytes."""
        ...
