# planetgen/core/models.py
"""
Body Records
============

Immutable records produced by the pipeline. Each stage returns one of
the property groups below; the assembler bundles them into a
`CelestialBody` together with its `Provenance`.

Records are plain frozen dataclasses. `to_dict()` flattens one to
JSON-compatible values; `CelestialBody.from_dict()` reloads a
materialized body through a pydantic `TypeAdapter`, which checks field
types and unknown keys before each record's own `__post_init__` runs.
That is the "load directly" half of save/load.
"""

from __future__ import annotations

import dataclasses
import enum
import functools
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from pydantic import ConfigDict, TypeAdapter, with_config

from planetgen.core.archetypes import (
    AsteroidType,
    BodyKind,
    OrbitZone,
    RingComplexity,
    SizeCategory,
    SurfaceType,
)
from planetgen.core.constants import escape_velocity, surface_gravity


# ============================================================
# Plain-dict conversion
# ============================================================

# Shared pydantic config for every record: unknown keys in saved data are errors.
RECORD_CONFIG = ConfigDict(extra="forbid")


def to_plain(value: Any) -> Any:
    """Recursively turn records, enums and tuples into JSON-compatible values."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: to_plain(getattr(value, f.name))
            for f in dataclasses.fields(value)
        }
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, dict):
        return {str(k): to_plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_plain(v) for v in value]
    return value


@functools.lru_cache(maxsize=None)
def record_adapter(cls: type) -> TypeAdapter:
    return TypeAdapter(cls)


def from_plain(cls: type, data: Dict[str, Any]) -> Any:
    """
    Rebuild a record class from the output of `to_plain`.

    Field types, enum values and nested records are validated by pydantic,
    and each record's `__post_init__` still runs. Bad data raises
    `pydantic.ValidationError`, which is a `ValueError`.
    """
    return record_adapter(cls).validate_python(data)


# ============================================================
# Property groups
# ============================================================

@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class OrbitalProps:
    """
    semi_major_axis_m          : [m]
    eccentricity               : [0, 1)
    inclination_deg            : [deg], > 90 means retrograde
    longitude_ascending_node_deg, argument_periapsis_deg, mean_anomaly_deg : [deg]
    orbital_period_s           : Kepler period around the parent [s]
    parent_id                  : left blank; assigned by the system assembler
    """
    semi_major_axis_m: float
    eccentricity: float
    inclination_deg: float
    longitude_ascending_node_deg: float
    argument_periapsis_deg: float
    mean_anomaly_deg: float
    orbital_period_s: float
    parent_id: str = ""

    def __post_init__(self):
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError("eccentricity must be in [0, 1).")
        if self.semi_major_axis_m <= 0.0:
            raise ValueError("semi_major_axis_m must be positive.")

    @property
    def is_retrograde(self) -> bool:
        return self.inclination_deg > 90.0


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class PhysicalProps:
    """
    rotation_period_s : signed; negative = retrograde spin
    oblateness        : flattening f in [0, 0.15]
    internal_heat_w   : radiogenic + tidal heat flow [W]
    tidal_heating_w   : tidal part of internal_heat_w [W]
    """
    mass_kg: float
    radius_m: float
    density_kg_m3: float
    rotation_period_s: float
    axial_tilt_deg: float
    oblateness: float
    magnetic_moment_a_m2: float
    internal_heat_w: float
    tidal_heating_w: float = 0.0
    tidally_locked: bool = False

    def __post_init__(self):
        if self.mass_kg <= 0.0:
            raise ValueError("mass_kg must be positive.")
        if self.radius_m <= 0.0:
            raise ValueError("radius_m must be positive.")

    @property
    def surface_gravity_m_s2(self) -> float:
        return surface_gravity(self.mass_kg, self.radius_m)

    @property
    def escape_velocity_m_s(self) -> float:
        return escape_velocity(self.mass_kg, self.radius_m)

    @property
    def is_retrograde(self) -> bool:
        return self.rotation_period_s < 0.0


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class AtmosphereProps:
    surface_pressure_pa: float
    scale_height_m: float
    composition: Dict[str, float]
    greenhouse_factor: float
    mean_molecular_weight_amu: float
    classification: str = ""


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class TerrainProps:
    max_elevation_m: float
    crater_density: float       # 0-1
    tectonic_activity: float    # 0-1
    erosion: float              # 0-1


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class HydrosphereProps:
    ocean_coverage: float       # fraction of surface
    mean_depth_m: float
    salinity: float             # mass fraction


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class CryosphereProps:
    polar_cap_coverage: float
    permafrost_depth_m: float
    subsurface_ocean: bool = False
    subsurface_ocean_depth_m: Optional[float] = None
    cryovolcanism: bool = False


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class SurfaceProps:
    temperature_k: float
    albedo: float
    surface_type: SurfaceType
    volcanism: float
    materials: Dict[str, float]
    terrain: Optional[TerrainProps] = None
    hydrosphere: Optional[HydrosphereProps] = None
    cryosphere: Optional[CryosphereProps] = None


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class RingBand:
    name: str
    inner_radius_m: float
    outer_radius_m: float
    optical_depth: float
    composition: Dict[str, float]
    particle_size_m: float

    @property
    def width_m(self) -> float:
        return self.outer_radius_m - self.inner_radius_m


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class RingSystemProps:
    """
    bands   : ordered inner -> outer, non-overlapping
    icy     : True when the system sits beyond the ice line
    """
    bands: Tuple[RingBand, ...]
    mass_kg: float
    inclination_deg: float
    complexity: RingComplexity
    icy: bool

    @property
    def inner_radius_m(self) -> float:
        return self.bands[0].inner_radius_m

    @property
    def outer_radius_m(self) -> float:
        return self.bands[-1].outer_radius_m


# ============================================================
# Provenance + body
# ============================================================

@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class Provenance:
    """
    seed            : stream seed the body was generated from
    stream_position : draws already consumed when generation began
    spec            : BodySpec.to_dict() snapshot
    timestamp       : UTC ISO-8601; not part of equality
    """
    seed: int
    stream_position: int
    generator_version: str
    schema_version: int
    spec: Dict[str, Any]
    timestamp: str = field(default="", compare=False)


@with_config(RECORD_CONFIG)
@dataclass(frozen=True)
class CelestialBody:
    id: str
    name: str
    kind: BodyKind
    physical: PhysicalProps
    provenance: Provenance
    size_category: Optional[SizeCategory] = None
    zone: Optional[OrbitZone] = None
    asteroid_type: Optional[AsteroidType] = None
    orbital: Optional[OrbitalProps] = None
    atmosphere: Optional[AtmosphereProps] = None
    surface: Optional[SurfaceProps] = None
    rings: Optional[RingSystemProps] = None

    def to_dict(self) -> Dict[str, Any]:
        return to_plain(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CelestialBody":
        return from_plain(cls, data)


__all__ = [
    "RECORD_CONFIG", "record_adapter", "to_plain", "from_plain",
    "OrbitalProps", "PhysicalProps", "AtmosphereProps",
    "TerrainProps", "HydrosphereProps", "CryosphereProps", "SurfaceProps",
    "RingBand", "RingSystemProps", "Provenance", "CelestialBody",
]
