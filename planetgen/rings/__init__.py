"""
Ring Systems
============

Roche/Hill-bounded band layouts with resonance gaps, icy or rocky
composition by the ice line, and an extrapolated ring mass.
"""

from .generator import RingSystemGenerator, band_name, ice_line_m, ring_mass, ring_presence_chance
from .layout import (
    RESONANCE_FRACTIONS,
    RING_PARTICLE_DENSITY_KG_M3,
    band_intervals,
    place_gaps,
    ring_bounds,
    ring_roche_limit,
)

__all__ = [
    "RingSystemGenerator",
    "band_name",
    "ice_line_m",
    "ring_mass",
    "ring_presence_chance",
    "RESONANCE_FRACTIONS",
    "RING_PARTICLE_DENSITY_KG_M3",
    "band_intervals",
    "place_gaps",
    "ring_bounds",
    "ring_roche_limit",
]
