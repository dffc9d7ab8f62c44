from .clock import Clock
from .entropy import EntropySource

__all__ = ["Clock", "EntropySource"]
