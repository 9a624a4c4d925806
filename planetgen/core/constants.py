# planetgen/core/constants.py
"""
Physical constants (plain floats)
=================================

Values are taken from `astropy.constants` once at import and stored as
SI floats, so the generators never carry Quantity objects around and the
arithmetic stays reproducible call to call.
"""

from __future__ import annotations

import math

from astropy import constants as const
from astropy import units as u


# ============================================================
# Fundamental
# ============================================================

G = float(const.G.to(u.m**3 / (u.kg * u.s**2)).value)          # [m^3 kg^-1 s^-2]
K_B = float(const.k_B.to(u.J / u.K).value)                       # [J/K]
AMU_KG = float(const.u.to(u.kg).value)                           # [kg]
SIGMA_SB = float(const.sigma_sb.to(u.W / (u.m**2 * u.K**4)).value)  # [W m^-2 K^-4]


# ============================================================
# Astronomical
# ============================================================

AU_M = float(u.au.to(u.m))
L_SUN_W = float(const.L_sun.to(u.W).value)
M_SUN_KG = float(const.M_sun.to(u.kg).value)
R_SUN_M = float(const.R_sun.to(u.m).value)
M_EARTH_KG = float(const.M_earth.to(u.kg).value)
R_EARTH_M = float(const.R_earth.to(u.m).value)
M_JUP_KG = float(const.M_jup.to(u.kg).value)

SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
SECONDS_PER_YEAR = 365.25 * SECONDS_PER_DAY

G_EARTH_M_S2 = G * M_EARTH_KG / R_EARTH_M**2
OMEGA_EARTH_RAD_S = 2.0 * math.pi / 86164.1   # sidereal day

WATER_FREEZE_K = 273.15
WATER_BOIL_K = 373.15
WATER_TRIPLE_POINT_PA = 611.657
BAR_PA = 1.0e5

# Molar masses of the gases the atmosphere stage knows about [amu]
GAS_MOLAR_MASS_AMU = {
    "H2": 2.016,
    "He": 4.003,
    "CH4": 16.04,
    "NH3": 17.03,
    "H2O": 18.02,
    "N2": 28.01,
    "O2": 32.00,
    "Ar": 39.95,
    "CO2": 44.01,
    "SO2": 64.07,
}


def sphere_volume(radius_m: float) -> float:
    return 4.0 / 3.0 * math.pi * radius_m**3


def radius_from_mass_density(mass_kg: float, density_kg_m3: float) -> float:
    """Invert rho = m / (4/3 pi r^3)."""
    if mass_kg <= 0.0 or density_kg_m3 <= 0.0:
        return 0.0
    return (3.0 * mass_kg / (4.0 * math.pi * density_kg_m3)) ** (1.0 / 3.0)


def density_from_mass_radius(mass_kg: float, radius_m: float) -> float:
    if radius_m <= 0.0:
        return 0.0
    return mass_kg / sphere_volume(radius_m)


def surface_gravity(mass_kg: float, radius_m: float) -> float:
    if radius_m <= 0.0:
        return 0.0
    return G * mass_kg / radius_m**2


def escape_velocity(mass_kg: float, radius_m: float) -> float:
    if radius_m <= 0.0 or mass_kg <= 0.0:
        return 0.0
    return math.sqrt(2.0 * G * mass_kg / radius_m)


def orbital_period(semi_major_axis_m: float, central_mass_kg: float, body_mass_kg: float = 0.0) -> float:
    """Kepler's third law [s]."""
    mu = G * (central_mass_kg + body_mass_kg)
    if mu <= 0.0 or semi_major_axis_m <= 0.0:
        return 0.0
    return 2.0 * math.pi * math.sqrt(semi_major_axis_m**3 / mu)


def hill_radius(semi_major_axis_m: float, eccentricity: float, body_mass_kg: float, central_mass_kg: float) -> float:
    """Hill-sphere radius at periapsis, r_H = a (1 - e) (m / 3M)^(1/3)."""
    if central_mass_kg <= 0.0 or body_mass_kg <= 0.0:
        return 0.0
    return semi_major_axis_m * (1.0 - eccentricity) * (body_mass_kg / (3.0 * central_mass_kg)) ** (1.0 / 3.0)


def roche_limit(primary_radius_m: float, primary_density_kg_m3: float, satellite_density_kg_m3: float) -> float:
    """Fluid Roche limit, d = 2.44 R (rho_M / rho_m)^(1/3)."""
    if satellite_density_kg_m3 <= 0.0:
        return math.inf
    return 2.44 * primary_radius_m * (primary_density_kg_m3 / satellite_density_kg_m3) ** (1.0 / 3.0)


__all__ = [
    "G", "K_B", "AMU_KG", "SIGMA_SB",
    "AU_M", "L_SUN_W", "M_SUN_KG", "R_SUN_M", "M_EARTH_KG", "R_EARTH_M", "M_JUP_KG",
    "SECONDS_PER_HOUR", "SECONDS_PER_DAY", "SECONDS_PER_YEAR",
    "G_EARTH_M_S2", "OMEGA_EARTH_RAD_S",
    "WATER_FREEZE_K", "WATER_BOIL_K", "WATER_TRIPLE_POINT_PA", "BAR_PA", "GAS_MOLAR_MASS_AMU",
    "sphere_volume", "radius_from_mass_density", "density_from_mass_radius",
    "surface_gravity", "escape_velocity", "orbital_period", "hill_radius",
    "roche_limit",
]
