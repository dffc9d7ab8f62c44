import logging
import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from uuuidv7.adapters.memory_providers import FixedClock
from uuuidv7.adapters.secrets_entropy import SecretsEntropy
from uuuidv7.adapters.system_clock import SystemClock
from uuuidv7.domain.generator import Uuid7Generator

logger = logging.getLogger(__name__)


class GeneratorSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Reject non-v7 identifiers in extract_timestamp
    strict_extract: bool = True
    # Pin the default generator to a fixed instant (development fixtures)
    fixed_time_ns: Optional[int] = Field(default=None, ge=0)


def load_settings() -> GeneratorSettings:
    """Read settings from UUUIDV7_* environment variables."""
    values = {}

    strict = os.getenv("UUUIDV7_STRICT_EXTRACT")
    if strict is not None:
        values["strict_extract"] = strict.strip()

    fixed_time = os.getenv("UUUIDV7_FIXED_TIME_NS")
    if fixed_time:
        values["fixed_time_ns"] = fixed_time

    return GeneratorSettings(**values)


def build_generator(settings: Optional[GeneratorSettings] = None) -> Uuid7Generator:
    """Wire a generator to the system clock and the secrets module."""
    settings = settings or GeneratorSettings()
    if settings.fixed_time_ns is not None:
        logger.warning(f"UUIDv7 generator pinned to fixed instant {settings.fixed_time_ns}ns")
        clock = FixedClock(settings.fixed_time_ns)
    else:
        clock = SystemClock()
    return Uuid7Generator(clock, SecretsEntropy(), strict=settings.strict_extract)


# Singleton instance
_generator_instance: Optional[Uuid7Generator] = None


def get_generator() -> Uuid7Generator:
    """Get or create the default generator singleton."""
    global _generator_instance
    if _generator_instance is None:
        settings = load_settings()
        logger.info(f"Initializing default UUIDv7 generator (strict_extract={settings.strict_extract})")
        _generator_instance = build_generator(settings)
    return _generator_instance


def reset_generator() -> None:
    """Drop the singleton so the next get_generator() re-reads the environment."""
    global _generator_instance
    _generator_instance = None
