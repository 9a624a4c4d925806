# planetgen/core/spec.py
"""
BodySpec
========

Declarative request for one body. Anything left as None is generated;
anything set is copied to the output unchanged and its random draw is
skipped. Overrides are grouped per pipeline stage so each stage only
sees the fields it owns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from pydantic import with_config

from planetgen.core.archetypes import (
    AsteroidType,
    BodyKind,
    OrbitZone,
    RingComplexity,
    SizeCategory,
    SurfaceType,
)
from planetgen.core.constants import GAS_MOLAR_MASS_AMU
from planetgen.core.models import RECORD_CONFIG, from_plain, to_plain


# ============================================================
# Override groups
# ============================================================

@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class OrbitalOverrides:
    semi_major_axis_m: Optional[float] = None
    eccentricity: Optional[float] = None
    inclination_deg: Optional[float] = None
    longitude_ascending_node_deg: Optional[float] = None
    argument_periapsis_deg: Optional[float] = None
    mean_anomaly_deg: Optional[float] = None

    def __post_init__(self):
        if self.eccentricity is not None and not (0.0 <= self.eccentricity < 1.0):
            raise ValueError("eccentricity override must be in [0, 1).")
        if self.semi_major_axis_m is not None and self.semi_major_axis_m <= 0.0:
            raise ValueError("semi_major_axis_m override must be positive.")


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class PhysicalOverrides:
    mass_kg: Optional[float] = None
    radius_m: Optional[float] = None
    rotation_period_s: Optional[float] = None
    axial_tilt_deg: Optional[float] = None
    oblateness: Optional[float] = None
    magnetic_moment_a_m2: Optional[float] = None
    internal_heat_w: Optional[float] = None

    def __post_init__(self):
        if self.mass_kg is not None and self.mass_kg <= 0.0:
            raise ValueError("mass_kg override must be positive.")
        if self.radius_m is not None and self.radius_m <= 0.0:
            raise ValueError("radius_m override must be positive.")
        if self.rotation_period_s is not None and self.rotation_period_s == 0.0:
            raise ValueError("rotation_period_s override must be non-zero.")


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class AtmosphereOverrides:
    surface_pressure_pa: Optional[float] = None
    composition: Optional[Dict[str, float]] = None
    greenhouse_factor: Optional[float] = None

    def __post_init__(self):
        if self.composition is not None:
            unknown = set(self.composition) - set(GAS_MOLAR_MASS_AMU)
            if unknown:
                raise ValueError(f"composition override has unknown gases {sorted(unknown)}.")
            if abs(sum(self.composition.values()) - 1.0) > 1e-6:
                raise ValueError("composition override must sum to 1.")
        if self.surface_pressure_pa is not None and self.surface_pressure_pa < 0.0:
            raise ValueError("surface_pressure_pa override must be non-negative.")


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class SurfaceOverrides:
    albedo: Optional[float] = None
    surface_type: Optional[SurfaceType] = None
    volcanism: Optional[float] = None
    temperature_k: Optional[float] = None

    def __post_init__(self):
        if self.albedo is not None and not (0.0 <= self.albedo <= 1.0):
            raise ValueError("albedo override must be in [0, 1].")
        if self.volcanism is not None and not (0.0 <= self.volcanism <= 1.0):
            raise ValueError("volcanism override must be in [0, 1].")


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class RingOverrides:
    band_count: Optional[int] = None
    mass_kg: Optional[float] = None
    inclination_deg: Optional[float] = None

    def __post_init__(self):
        if self.band_count is not None and self.band_count < 1:
            raise ValueError("band_count override must be at least 1.")


# ============================================================
# BodySpec
# ============================================================

@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class BodySpec:
    """
    kind            : planet / moon / asteroid
    seed            : generation seed for this body's stream
    name_hint       : fixed name; a name is generated when empty
    size_category   : pinned archetype (planets, moons)
    zone            : pinned orbit zone (planets; moons derive theirs)
    asteroid_type   : pinned composition class (asteroids)
    ring_complexity : pinned ring archetype (planets)
    captured        : moon on a captured (irregular) orbit
    is_large        : asteroid drawn from the large-mass table
    has_atmosphere  : pin presence (True/False); None = generated
    has_rings       : pin presence (True/False); None = generated
    """
    kind: BodyKind
    seed: int = 0
    name_hint: str = ""
    size_category: Optional[SizeCategory] = None
    zone: Optional[OrbitZone] = None
    asteroid_type: Optional[AsteroidType] = None
    ring_complexity: Optional[RingComplexity] = None
    captured: bool = False
    is_large: bool = False
    has_atmosphere: Optional[bool] = None
    has_rings: Optional[bool] = None
    orbital: OrbitalOverrides = field(default_factory=OrbitalOverrides)
    physical: PhysicalOverrides = field(default_factory=PhysicalOverrides)
    atmosphere: AtmosphereOverrides = field(default_factory=AtmosphereOverrides)
    surface: SurfaceOverrides = field(default_factory=SurfaceOverrides)
    rings: RingOverrides = field(default_factory=RingOverrides)

    def __post_init__(self):
        if self.seed < 0:
            raise ValueError("seed must be non-negative.")

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BodySpec":
        return from_plain(cls, data)


def planet_spec(seed: int = 0, **kwargs) -> BodySpec:
    return BodySpec(kind=BodyKind.PLANET, seed=seed, **kwargs)


def moon_spec(seed: int = 0, captured: bool = False, **kwargs) -> BodySpec:
    return BodySpec(kind=BodyKind.MOON, seed=seed, captured=captured, **kwargs)


def asteroid_spec(seed: int = 0, is_large: bool = False, **kwargs) -> BodySpec:
    return BodySpec(kind=BodyKind.ASTEROID, seed=seed, is_large=is_large, **kwargs)


__all__ = [
    "OrbitalOverrides", "PhysicalOverrides", "AtmosphereOverrides",
    "SurfaceOverrides", "RingOverrides",
    "BodySpec", "planet_spec", "moon_spec", "asteroid_spec",
]
