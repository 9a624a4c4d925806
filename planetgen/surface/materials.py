# planetgen/surface/materials.py
"""
Surface material mixes, keyed by surface type (or by asteroid type).
Sampled the same way as gas mixes: one draw per material, normalised.
"""

from __future__ import annotations

from typing import Dict, Tuple

from planetgen.atmosphere.composition import normalize
from planetgen.core.archetypes import AsteroidType, SurfaceType
from planetgen.core.rng import RandomStream

MaterialTemplate = Tuple[Tuple[str, Tuple[float, float]], ...]

SURFACE_MATERIALS: Dict[SurfaceType, MaterialTemplate] = {
    SurfaceType.MOLTEN: (("silicate_melt", (0.5, 0.8)), ("basalt", (0.15, 0.4)), ("iron", (0.02, 0.1))),
    SurfaceType.VOLCANIC: (("basalt", (0.5, 0.7)), ("sulfur", (0.05, 0.2)), ("silicate", (0.15, 0.35))),
    SurfaceType.FROZEN: (("water_ice", (0.5, 0.8)), ("nitrogen_ice", (0.05, 0.3)), ("tholins", (0.01, 0.1))),
    SurfaceType.ICY: (("water_ice", (0.4, 0.7)), ("silicate", (0.2, 0.5)), ("carbon_dioxide_ice", (0.01, 0.1))),
    SurfaceType.ROCKY: (("silicate", (0.5, 0.7)), ("basalt", (0.2, 0.4)), ("regolith", (0.05, 0.2))),
    SurfaceType.DESERT: (("silicate", (0.4, 0.6)), ("iron_oxide", (0.1, 0.3)), ("sand", (0.2, 0.4))),
    SurfaceType.OCEANIC: (("water", (0.6, 0.9)), ("silicate", (0.08, 0.3)), ("sediment", (0.02, 0.1))),
    SurfaceType.TEMPERATE: (("silicate", (0.3, 0.5)), ("water", (0.2, 0.5)), ("soil", (0.1, 0.3)), ("basalt", (0.05, 0.15))),
}

ASTEROID_MATERIALS: Dict[AsteroidType, MaterialTemplate] = {
    AsteroidType.CARBONACEOUS: (("carbon_compounds", (0.2, 0.4)), ("hydrated_silicate", (0.4, 0.6)), ("water_ice", (0.0, 0.1))),
    AsteroidType.SILICACEOUS: (("olivine", (0.3, 0.5)), ("pyroxene", (0.3, 0.5)), ("iron_nickel", (0.05, 0.2))),
    AsteroidType.METALLIC: (("iron_nickel", (0.7, 0.95)), ("silicate", (0.03, 0.2)), ("troilite", (0.01, 0.1))),
}


def sample_materials(template: MaterialTemplate, rng: RandomStream) -> Dict[str, float]:
    return normalize({name: rng.range(lo, hi) for name, (lo, hi) in template})


__all__ = ["SURFACE_MATERIALS", "ASTEROID_MATERIALS", "sample_materials"]
