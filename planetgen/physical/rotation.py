# planetgen/physical/rotation.py
"""
Spin state: tidal locking, rotation period, axial tilt, oblateness.
"""

from __future__ import annotations

import math
from typing import List, Tuple

from planetgen.core.bodies import EARTH, MOON
from planetgen.core.constants import G, M_EARTH_KG, SECONDS_PER_HOUR
from planetgen.core.rng import RandomStream


# ============================================================
# Tidal locking
# ============================================================

def tidal_lock_timescale_yr(
    semi_major_axis_m: float,
    body_mass_kg: float,
    body_radius_m: float,
    parent_mass_kg: float,
    reference_yr: float,
) -> float:
    """
    tau ~ a^6 m / (M^2 R^3), scaled from the Moon-Earth pair.

    reference_yr is the locking time of the Moon at its present orbit.
    """
    if body_radius_m <= 0.0 or parent_mass_kg <= 0.0:
        return math.inf
    return (
        reference_yr
        * (semi_major_axis_m / MOON.semi_major_axis_m) ** 6
        * (body_mass_kg / MOON.mass_kg)
        * (EARTH.mass_kg / parent_mass_kg) ** 2
        * (MOON.radius_m / body_radius_m) ** 3
    )


# ============================================================
# Rotation period
# ============================================================

# (minimum mass [M_earth], period band [h]); larger bodies spin faster
ROTATION_BANDS_H: List[Tuple[float, Tuple[float, float]]] = [
    (50.0, (8.0, 16.0)),
    (10.0, (12.0, 24.0)),
    (1.0, (16.0, 48.0)),
    (0.01, (20.0, 120.0)),
    (0.0, (24.0, 240.0)),
]
ASTEROID_ROTATION_H = (2.0, 20.0)


def rotation_band_h(mass_kg: float) -> Tuple[float, float]:
    m_earth = mass_kg / M_EARTH_KG
    for min_mass, band in ROTATION_BANDS_H:
        if m_earth >= min_mass:
            return band
    return ROTATION_BANDS_H[-1][1]


def sample_rotation_period(
    band_h: Tuple[float, float],
    retrograde_chance: float,
    rng: RandomStream,
) -> float:
    """Signed period [s]; 2 draws (period, retrograde roll)."""
    period_s = rng.range(*band_h) * SECONDS_PER_HOUR
    if rng.chance(retrograde_chance):
        period_s = -period_s
    return period_s


# ============================================================
# Axial tilt
# ============================================================

LOCKED_TILT_DEG = (0.0, 10.0)
TILT_TIERS: List[Tuple[Tuple[float, float], float]] = [
    ((0.0, 30.0), 0.60),
    ((30.0, 60.0), 0.30),
    ((60.0, 90.0), 0.08),
    ((90.0, 180.0), 0.02),
]


def sample_axial_tilt(locked: bool, rng: RandomStream) -> float:
    """Locked: 1 draw in [0, 10]. Free: tier roll + value (2 draws)."""
    if locked:
        return rng.range(*LOCKED_TILT_DEG)
    lo, hi = rng.weighted_choice(TILT_TIERS)
    return rng.range(lo, hi)


# ============================================================
# Oblateness
# ============================================================

RIGIDITY_ROCKY = 0.3
RIGIDITY_FLUID = 0.8
MAX_OBLATENESS = 0.15


def oblateness(rotation_period_s: float, radius_m: float, mass_kg: float, rigidity: float) -> float:
    """f = (5/4) w^2 R^3 / (G M), scaled by rigidity, clamped to [0, 0.15]."""
    if rotation_period_s == 0.0 or mass_kg <= 0.0:
        return 0.0
    omega = 2.0 * math.pi / abs(rotation_period_s)
    f = 1.25 * omega**2 * radius_m**3 / (G * mass_kg) * rigidity
    return min(max(f, 0.0), MAX_OBLATENESS)


__all__ = [
    "tidal_lock_timescale_yr",
    "ROTATION_BANDS_H",
    "ASTEROID_ROTATION_H",
    "rotation_band_h",
    "sample_rotation_period",
    "TILT_TIERS",
    "sample_axial_tilt",
    "RIGIDITY_ROCKY",
    "RIGIDITY_FLUID",
    "oblateness",
]
