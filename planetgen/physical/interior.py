# planetgen/physical/interior.py
"""
Interior: magnetic dynamo and heat budget.

Heat
----
- Radiogenic : H0 * (m / M_earth) * 0.5^(age / 2 Gyr), with H0 chosen so
  an Earth-mass body at 4.5 Gyr gives ~47 TW.
- Tidal (moons only), calibrated on Io:
      P = P_io * (M_p/M_jup)^2.5 * (R/R_io)^5 * (e/e_io)^2 * (a_io/a)^7.5
  capped at 1e16 W.
"""

from __future__ import annotations

import math

from planetgen.core.bodies import IO, JUPITER
from planetgen.core.constants import M_EARTH_KG, OMEGA_EARTH_RAD_S, SECONDS_PER_DAY
from planetgen.core.rng import RandomStream

EARTH_MAGNETIC_MOMENT_A_M2 = 8.0e22
DYNAMO_MIN_MASS_EARTH = 0.05
DYNAMO_MAX_PERIOD_S = 100.0 * SECONDS_PER_DAY
DYNAMO_SCALE = (0.5, 2.0)

EARTH_HEAT_FLOW_W = 4.7e13
RADIOGENIC_HALF_LIFE_GYR = 2.0
RADIOGENIC_H0_W = EARTH_HEAT_FLOW_W / 0.5 ** (4.5 / RADIOGENIC_HALF_LIFE_GYR)

IO_TIDAL_HEAT_W = 1.0e14
MAX_TIDAL_HEAT_W = 1.0e16


def has_dynamo_potential(mass_kg: float, rotation_period_s: float) -> bool:
    return (
        mass_kg / M_EARTH_KG >= DYNAMO_MIN_MASS_EARTH
        and rotation_period_s != 0.0
        and abs(rotation_period_s) <= DYNAMO_MAX_PERIOD_S
    )


def magnetic_moment(
    mass_kg: float,
    rotation_period_s: float,
    dead_dynamo_chance: float,
    rng: RandomStream,
) -> float:
    """
    Dipole moment [A m^2].

    Below the mass/rotation threshold: 0, no draws.
    Otherwise a dead-dynamo roll (1 draw), then a scale factor (1 draw)
    for a live dynamo:
        M = M_earth_dipole * (m/M_earth)^1.5 * (w/w_earth) * u[0.5, 2]
    """
    if not has_dynamo_potential(mass_kg, rotation_period_s):
        return 0.0
    if rng.chance(dead_dynamo_chance):
        return 0.0
    omega = 2.0 * math.pi / abs(rotation_period_s)
    return (
        EARTH_MAGNETIC_MOMENT_A_M2
        * (mass_kg / M_EARTH_KG) ** 1.5
        * (omega / OMEGA_EARTH_RAD_S)
        * rng.range(*DYNAMO_SCALE)
    )


def radiogenic_heat(mass_kg: float, age_gyr: float) -> float:
    return RADIOGENIC_H0_W * (mass_kg / M_EARTH_KG) * 0.5 ** (age_gyr / RADIOGENIC_HALF_LIFE_GYR)


def tidal_heating(
    parent_mass_kg: float,
    radius_m: float,
    eccentricity: float,
    semi_major_axis_m: float,
) -> float:
    if eccentricity <= 0.0 or semi_major_axis_m <= 0.0:
        return 0.0
    p = (
        IO_TIDAL_HEAT_W
        * (parent_mass_kg / JUPITER.mass_kg) ** 2.5
        * (radius_m / IO.radius_m) ** 5
        * (eccentricity / IO.eccentricity) ** 2
        * (IO.semi_major_axis_m / semi_major_axis_m) ** 7.5
    )
    return min(p, MAX_TIDAL_HEAT_W)


__all__ = [
    "EARTH_MAGNETIC_MOMENT_A_M2",
    "EARTH_HEAT_FLOW_W",
    "MAX_TIDAL_HEAT_W",
    "has_dynamo_potential",
    "magnetic_moment",
    "radiogenic_heat",
    "tidal_heating",
]
