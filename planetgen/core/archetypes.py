# planetgen/core/archetypes.py
"""
Archetype Tables
================

Closed categories (size / zone / asteroid type / ring complexity) and
the numeric ranges they key. All ranges are (lo, hi) tuples; masses are
in Earth masses unless the name says otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Tuple

from planetgen.core.constants import M_EARTH_KG

Range = Tuple[float, float]


# ============================================================
# Categories
# ============================================================

class BodyKind(str, Enum):
    PLANET = "planet"
    MOON = "moon"
    ASTEROID = "asteroid"


class SizeCategory(str, Enum):
    DWARF = "dwarf"
    SUB_TERRESTRIAL = "sub_terrestrial"
    TERRESTRIAL = "terrestrial"
    SUPER_EARTH = "super_earth"
    ICE_GIANT = "ice_giant"
    GAS_GIANT = "gas_giant"

    @property
    def is_gaseous(self) -> bool:
        return self in (SizeCategory.ICE_GIANT, SizeCategory.GAS_GIANT)


class OrbitZone(str, Enum):
    HOT = "hot"
    TEMPERATE = "temperate"
    COLD = "cold"


class AsteroidType(str, Enum):
    CARBONACEOUS = "carbonaceous"
    SILICACEOUS = "silicaceous"
    METALLIC = "metallic"


class RingComplexity(str, Enum):
    TRACE = "trace"
    SIMPLE = "simple"
    COMPLEX = "complex"


class SurfaceType(str, Enum):
    MOLTEN = "molten"
    VOLCANIC = "volcanic"
    FROZEN = "frozen"
    ICY = "icy"
    ROCKY = "rocky"
    DESERT = "desert"
    OCEANIC = "oceanic"
    TEMPERATE = "temperate"


# ============================================================
# Size archetypes
# ============================================================

@dataclass(frozen=True)
class SizeArchetype:
    """
    mass_earth      : (lo, hi) mass range [M_earth], sampled log-uniformly
    density_kg_m3   : (lo, hi) bulk density range [kg/m^3]
    """
    mass_earth: Range
    density_kg_m3: Range

    @property
    def mass_kg(self) -> Range:
        return (self.mass_earth[0] * M_EARTH_KG, self.mass_earth[1] * M_EARTH_KG)

    @property
    def nominal_density_kg_m3(self) -> float:
        return 0.5 * (self.density_kg_m3[0] + self.density_kg_m3[1])


SIZE_TABLE: Dict[SizeCategory, SizeArchetype] = {
    SizeCategory.DWARF: SizeArchetype((1.0e-4, 0.01), (1800.0, 3000.0)),
    SizeCategory.SUB_TERRESTRIAL: SizeArchetype((0.01, 0.3), (3000.0, 4500.0)),
    SizeCategory.TERRESTRIAL: SizeArchetype((0.3, 2.0), (4500.0, 6000.0)),
    SizeCategory.SUPER_EARTH: SizeArchetype((2.0, 10.0), (5000.0, 8000.0)),
    SizeCategory.ICE_GIANT: SizeArchetype((10.0, 50.0), (1000.0, 1800.0)),
    SizeCategory.GAS_GIANT: SizeArchetype((50.0, 4000.0), (500.0, 1600.0)),
}

PLANET_SIZE_WEIGHTS: List[Tuple[SizeCategory, float]] = [
    (SizeCategory.DWARF, 0.10),
    (SizeCategory.SUB_TERRESTRIAL, 0.15),
    (SizeCategory.TERRESTRIAL, 0.20),
    (SizeCategory.SUPER_EARTH, 0.15),
    (SizeCategory.ICE_GIANT, 0.15),
    (SizeCategory.GAS_GIANT, 0.25),
]

# Moons of giants can be large; moons of rocky parents are almost always small
GIANT_MOON_SIZE_WEIGHTS: List[Tuple[SizeCategory, float]] = [
    (SizeCategory.DWARF, 0.60),
    (SizeCategory.SUB_TERRESTRIAL, 0.30),
    (SizeCategory.TERRESTRIAL, 0.10),
]
ROCKY_MOON_SIZE_WEIGHTS: List[Tuple[SizeCategory, float]] = [
    (SizeCategory.DWARF, 0.90),
    (SizeCategory.SUB_TERRESTRIAL, 0.10),
]


# ============================================================
# Orbit zones
# ============================================================

@dataclass(frozen=True)
class ZoneArchetype:
    """
    distance_au  : (lo, hi) semi-major axis at 1 L_sun [AU]; scales with sqrt(L)
    eccentricity : (lo, hi)
    """
    distance_au: Range
    eccentricity: Range


ZONE_TABLE: Dict[OrbitZone, ZoneArchetype] = {
    OrbitZone.HOT: ZoneArchetype((0.05, 0.7), (0.0, 0.10)),
    OrbitZone.TEMPERATE: ZoneArchetype((0.8, 1.6), (0.0, 0.05)),
    OrbitZone.COLD: ZoneArchetype((1.6, 40.0), (0.0, 0.20)),
}

ZONE_WEIGHTS: List[Tuple[OrbitZone, float]] = [
    (OrbitZone.HOT, 0.25),
    (OrbitZone.TEMPERATE, 0.25),
    (OrbitZone.COLD, 0.50),
]

# Equilibrium-temperature bounds used to classify a moon's zone [K]
HOT_ZONE_MIN_K = 350.0
COLD_ZONE_MAX_K = 200.0


def zone_for_temperature(t_eq_k: float) -> OrbitZone:
    if t_eq_k > HOT_ZONE_MIN_K:
        return OrbitZone.HOT
    if t_eq_k < COLD_ZONE_MAX_K:
        return OrbitZone.COLD
    return OrbitZone.TEMPERATE


# ============================================================
# Asteroids
# ============================================================

@dataclass(frozen=True)
class AsteroidArchetype:
    density_kg_m3: Range
    albedo: Range


ASTEROID_TABLE: Dict[AsteroidType, AsteroidArchetype] = {
    AsteroidType.CARBONACEOUS: AsteroidArchetype((1300.0, 2200.0), (0.03, 0.09)),
    AsteroidType.SILICACEOUS: AsteroidArchetype((2200.0, 3500.0), (0.10, 0.28)),
    AsteroidType.METALLIC: AsteroidArchetype((4500.0, 7500.0), (0.10, 0.20)),
}

ASTEROID_TYPE_WEIGHTS: List[Tuple[AsteroidType, float]] = [
    (AsteroidType.CARBONACEOUS, 0.75),
    (AsteroidType.SILICACEOUS, 0.17),
    (AsteroidType.METALLIC, 0.08),
]

ASTEROID_BELT_AU: Range = (2.1, 3.3)
ASTEROID_SMALL_MASS_KG: Range = (1.0e10, 1.0e18)
ASTEROID_LARGE_MASS_KG: Range = (1.0e19, 1.0e21)


# ============================================================
# Rings
# ============================================================

@dataclass(frozen=True)
class RingArchetype:
    """
    band_count    : (lo, hi) inclusive integer range
    optical_depth : (lo, hi) per-band optical depth
    """
    band_count: Tuple[int, int]
    optical_depth: Range


RING_TABLE: Dict[RingComplexity, RingArchetype] = {
    RingComplexity.TRACE: RingArchetype((1, 1), (0.001, 0.01)),
    RingComplexity.SIMPLE: RingArchetype((2, 3), (0.01, 0.5)),
    RingComplexity.COMPLEX: RingArchetype((4, 8), (0.05, 2.0)),
}

RING_COMPLEXITY_WEIGHTS: List[Tuple[RingComplexity, float]] = [
    (RingComplexity.TRACE, 0.50),
    (RingComplexity.SIMPLE, 0.35),
    (RingComplexity.COMPLEX, 0.15),
]


def nominal_density(category: SizeCategory | None = None, asteroid_type: AsteroidType | None = None) -> float:
    """Mid-range density of a size category or asteroid type [kg/m^3]."""
    if asteroid_type is not None:
        lo, hi = ASTEROID_TABLE[asteroid_type].density_kg_m3
        return 0.5 * (lo + hi)
    if category is None:
        raise ValueError("nominal_density needs a size category or an asteroid type.")
    return SIZE_TABLE[category].nominal_density_kg_m3


# ============================================================
# Resolved archetype
# ============================================================

@dataclass(frozen=True)
class Archetype:
    """Categories fixed by archetype selection for one body."""
    kind: BodyKind
    zone: OrbitZone
    size_category: SizeCategory | None = None
    asteroid_type: AsteroidType | None = None

    @property
    def is_gaseous(self) -> bool:
        return self.size_category is not None and self.size_category.is_gaseous

    @property
    def is_rocky(self) -> bool:
        return not self.is_gaseous

    @property
    def density_range(self) -> Range:
        if self.asteroid_type is not None:
            return ASTEROID_TABLE[self.asteroid_type].density_kg_m3
        return SIZE_TABLE[self.size_category].density_kg_m3

    @property
    def nominal_density_kg_m3(self) -> float:
        return nominal_density(self.size_category, self.asteroid_type)


__all__ = [
    "BodyKind", "SizeCategory", "OrbitZone", "AsteroidType", "RingComplexity", "SurfaceType",
    "SizeArchetype", "SIZE_TABLE", "PLANET_SIZE_WEIGHTS",
    "GIANT_MOON_SIZE_WEIGHTS", "ROCKY_MOON_SIZE_WEIGHTS",
    "ZoneArchetype", "ZONE_TABLE", "ZONE_WEIGHTS", "zone_for_temperature",
    "HOT_ZONE_MIN_K", "COLD_ZONE_MAX_K",
    "AsteroidArchetype", "ASTEROID_TABLE", "ASTEROID_TYPE_WEIGHTS",
    "ASTEROID_BELT_AU", "ASTEROID_SMALL_MASS_KG", "ASTEROID_LARGE_MASS_KG",
    "RingArchetype", "RING_TABLE", "RING_COMPLEXITY_WEIGHTS",
    "Archetype", "nominal_density",
]
