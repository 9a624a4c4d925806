# planetgen/core/context.py
"""
ParentContext
=============

Read-only snapshot of the body a new body is generated around.

- For planets and asteroids the parent is a star: `semi_major_axis_m`
  is None and the Hill radius is unbounded.
- For moons (and for a planet's own ring system) the parent is a planet:
  it carries its orbit around the star plus the star's mass, so the Hill
  sphere and the stellar flux at the parent can be evaluated.

All queries are pure.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from planetgen.core.constants import (
    L_SUN_W,
    M_EARTH_KG,
    M_SUN_KG,
    R_SUN_M,
    SIGMA_SB,
    density_from_mass_radius,
    hill_radius,
    roche_limit,
)
from planetgen.core.errors import PreconditionError

# Planets heavier than this are treated as gaseous parents
GASEOUS_PARENT_MIN_EARTH = 10.0


@dataclass(frozen=True)
class ParentContext:
    """
    name              : display name of the parent
    mass_kg           : parent mass [kg]
    radius_m          : parent radius [m]
    luminosity_w      : luminosity of the illuminating star [W]
    age_gyr           : system age [Gyr]
    star_mass_kg      : star mass when the parent is a planet [kg]
    semi_major_axis_m : parent's orbit around the star [m] (None for a star)
    eccentricity      : parent's orbital eccentricity
    star_radius_m     : optional stellar radius [m]
    star_teff_k       : optional stellar effective temperature [K]
    parent_id         : identity of the parent record, if any
    """
    name: str
    mass_kg: float
    radius_m: float
    luminosity_w: float
    age_gyr: float
    star_mass_kg: Optional[float] = None
    semi_major_axis_m: Optional[float] = None
    eccentricity: float = 0.0
    star_radius_m: Optional[float] = None
    star_teff_k: Optional[float] = None
    parent_id: str = ""

    def __post_init__(self):
        if self.mass_kg <= 0.0:
            raise ValueError("ParentContext.mass_kg must be positive.")
        if self.radius_m <= 0.0:
            raise ValueError("ParentContext.radius_m must be positive.")
        if self.luminosity_w < 0.0:
            raise ValueError("ParentContext.luminosity_w must be non-negative.")
        if self.age_gyr < 0.0:
            raise ValueError("ParentContext.age_gyr must be non-negative.")
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError("ParentContext.eccentricity must be in [0, 1).")

    # --------------------
    # Classification
    # --------------------
    @property
    def is_star(self) -> bool:
        return self.semi_major_axis_m is None

    @property
    def is_gaseous(self) -> bool:
        return not self.is_star and self.mass_kg / M_EARTH_KG >= GASEOUS_PARENT_MIN_EARTH

    @property
    def luminosity_lsun(self) -> float:
        return self.luminosity_w / L_SUN_W

    @property
    def density_kg_m3(self) -> float:
        return density_from_mass_radius(self.mass_kg, self.radius_m)

    @property
    def age_yr(self) -> float:
        return self.age_gyr * 1.0e9

    # --------------------
    # Derived geometry
    # --------------------
    def hill_radius_m(self) -> float:
        """Hill-sphere radius of the parent; infinite for a star."""
        if self.is_star:
            return math.inf
        if self.star_mass_kg is None:
            raise PreconditionError(f"{self.name}: Hill radius needs the star mass.")
        return hill_radius(self.semi_major_axis_m, self.eccentricity, self.mass_kg, self.star_mass_kg)

    def roche_limit_m(self, particle_density_kg_m3: float) -> float:
        """Fluid Roche limit of the parent for a satellite of the given density."""
        return roche_limit(self.radius_m, self.density_kg_m3, particle_density_kg_m3)

    def stellar_distance_m(self, distance_m: Optional[float] = None) -> float:
        """Distance to the star: explicit, else the parent's own orbit."""
        if distance_m is not None:
            return distance_m
        if self.is_star:
            raise PreconditionError(f"{self.name}: a distance is required around a star.")
        return self.semi_major_axis_m

    def equilibrium_temperature(self, albedo: float, distance_m: Optional[float] = None) -> float:
        """
        Blackbody equilibrium temperature [K] under the star's flux.

        With a known stellar radius and effective temperature:
            T = T_eff * sqrt(R_star / 2d) * (1 - A)^(1/4)
        otherwise the luminosity form:
            T = [L (1 - A) / (16 pi sigma d^2)]^(1/4)
        """
        d = self.stellar_distance_m(distance_m)
        if d <= 0.0:
            return 0.0
        a = min(max(albedo, 0.0), 1.0)
        if self.star_radius_m is not None and self.star_teff_k is not None:
            return self.star_teff_k * math.sqrt(self.star_radius_m / (2.0 * d)) * (1.0 - a) ** 0.25
        if self.luminosity_w <= 0.0:
            return 0.0
        return (self.luminosity_w * (1.0 - a) / (16.0 * math.pi * SIGMA_SB * d * d)) ** 0.25

    def body_temperature(self, albedo: float, body_semi_major_axis_m: float) -> float:
        """
        Equilibrium temperature of a body orbiting this parent: around a
        star it sits at its own orbit, around a planet at the planet's.
        """
        if self.is_star:
            return self.equilibrium_temperature(albedo, body_semi_major_axis_m)
        return self.equilibrium_temperature(albedo)


# ============================================================
# Constructors
# ============================================================

def star_context(
    mass_msun: float = 1.0,
    luminosity_lsun: float = 1.0,
    age_gyr: float = 4.6,
    radius_rsun: float = 1.0,
    teff_k: Optional[float] = None,
    name: str = "star",
) -> ParentContext:
    """Context for bodies orbiting a star directly (planets, belt asteroids)."""
    return ParentContext(
        name=name,
        mass_kg=mass_msun * M_SUN_KG,
        radius_m=radius_rsun * R_SUN_M,
        luminosity_w=luminosity_lsun * L_SUN_W,
        age_gyr=age_gyr,
        star_radius_m=radius_rsun * R_SUN_M if teff_k is not None else None,
        star_teff_k=teff_k,
    )


def planet_context(
    mass_kg: float,
    radius_m: float,
    semi_major_axis_m: float,
    star: ParentContext,
    eccentricity: float = 0.0,
    name: str = "planet",
    parent_id: str = "",
) -> ParentContext:
    """Context for moons of a planet that orbits `star`."""
    return ParentContext(
        name=name,
        mass_kg=mass_kg,
        radius_m=radius_m,
        luminosity_w=star.luminosity_w,
        age_gyr=star.age_gyr,
        star_mass_kg=star.mass_kg,
        semi_major_axis_m=semi_major_axis_m,
        eccentricity=eccentricity,
        star_radius_m=star.star_radius_m,
        star_teff_k=star.star_teff_k,
        parent_id=parent_id,
    )


def context_from_body(body, star: ParentContext) -> ParentContext:
    """Context for moons of an already generated planet record."""
    if body.orbital is None:
        raise PreconditionError(f"{body.name}: a parent body needs orbital data.")
    return planet_context(
        mass_kg=body.physical.mass_kg,
        radius_m=body.physical.radius_m,
        semi_major_axis_m=body.orbital.semi_major_axis_m,
        eccentricity=body.orbital.eccentricity,
        star=star,
        name=body.name,
        parent_id=body.id,
    )


__all__ = ["ParentContext", "star_context", "planet_context", "context_from_body"]
