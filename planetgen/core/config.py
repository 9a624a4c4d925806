# planetgen/core/config.py
"""
Generator configuration.

Holds the knobs that are not part of a BodySpec but do
affect generated values, plus the version stamps recorded in every
body's provenance. Changing any of these changes generated output for
a given seed, so bump `generator_version` when you do.
"""

from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Callable

SCHEMA_VERSION = 1


def utc_now_iso() -> str:
    return datetime.datetime.now(datetime.timezone.utc).isoformat()


@dataclass(frozen=True)
class GeneratorConfig:
    """
    generator_version      : recorded in provenance
    schema_version         : record layout version, recorded in provenance
    clock                  : returns the provenance timestamp (UTC ISO-8601)
    tidal_lock_ref_yr      : locking timescale of the Moon-Earth reference pair [yr]
    dead_dynamo_planet     : chance a dynamo-capable planet has no field
    dead_dynamo_moon       : chance a dynamo-capable moon has no field
    gap_placement_attempts : retries for random ring-gap placement
    """
    generator_version: str = "0.1.0"
    schema_version: int = SCHEMA_VERSION
    clock: Callable[[], str] = field(default=utc_now_iso, compare=False)
    tidal_lock_ref_yr: float = 5.0e7
    dead_dynamo_planet: float = 0.15
    dead_dynamo_moon: float = 0.90
    gap_placement_attempts: int = 10

    def __post_init__(self):
        for name in ("dead_dynamo_planet", "dead_dynamo_moon"):
            p = getattr(self, name)
            if not (0.0 <= p <= 1.0):
                raise ValueError(f"{name} must be between 0 and 1.")
        if self.tidal_lock_ref_yr <= 0.0:
            raise ValueError("tidal_lock_ref_yr must be positive.")
        if self.gap_placement_attempts < 1:
            raise ValueError("gap_placement_attempts must be at least 1.")


def default_generator_config() -> GeneratorConfig:
    """Baseline configuration stamped with the package version."""
    from planetgen import __version__

    return GeneratorConfig(generator_version=__version__)


__all__ = ["SCHEMA_VERSION", "GeneratorConfig", "default_generator_config", "utc_now_iso"]
