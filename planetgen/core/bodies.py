# planetgen/core/bodies.py

from dataclasses import dataclass

from planetgen.core.constants import M_EARTH_KG, M_JUP_KG, R_EARTH_M


@dataclass(frozen=True)
class ReferenceBody:
    name: str
    mass_kg: float
    radius_m: float
    semi_major_axis_m: float | None = None   # around its own primary
    eccentricity: float = 0.0

# Calibration anchors for the scaling laws (tidal lock, tidal heat)
EARTH = ReferenceBody(
    name="Earth",
    mass_kg=M_EARTH_KG,
    radius_m=R_EARTH_M,
    semi_major_axis_m=1.495978707e11,
    eccentricity=0.0167,
)

MOON = ReferenceBody(
    name="Moon",
    mass_kg=7.342e22,
    radius_m=1.7374e6,
    semi_major_axis_m=3.844e8,
    eccentricity=0.0549,
)

JUPITER = ReferenceBody(
    name="Jupiter",
    mass_kg=M_JUP_KG,
    radius_m=6.9911e7,
    semi_major_axis_m=7.7857e11,
    eccentricity=0.0489,
)

IO = ReferenceBody(
    name="Io",
    mass_kg=8.9319e22,
    radius_m=1.8216e6,
    semi_major_axis_m=4.217e8,
    eccentricity=0.0041,
)

__all__ = ["ReferenceBody", "EARTH", "MOON", "JUPITER", "IO"]
