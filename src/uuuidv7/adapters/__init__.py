from .system_clock import SystemClock
from .secrets_entropy import SecretsEntropy
from .memory_providers import FixedClock, SteppingClock, FixedEntropy

__all__ = [
    "SystemClock",
    "SecretsEntropy",
    "FixedClock",
    "SteppingClock",
    "FixedEntropy",
]
