# planetgen/atmosphere/composition.py
"""
Gas mixes.

A template lists (gas, fraction range) pairs plus a surface-pressure
range. Sampling draws one fraction per gas in listed order and then
normalises the mix to sum to 1.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Mapping, Tuple

from planetgen.core.archetypes import OrbitZone, SizeCategory
from planetgen.core.constants import GAS_MOLAR_MASS_AMU
from planetgen.core.rng import RandomStream

Range = Tuple[float, float]


@dataclass(frozen=True)
class AtmosphereTemplate:
    name: str
    gases: Tuple[Tuple[str, Range], ...]
    pressure_bar: Range


# ============================================================
# Templates
# ============================================================

HYDROGEN_HELIUM = AtmosphereTemplate(
    "hydrogen-helium",
    (("H2", (0.82, 0.90)), ("He", (0.09, 0.16)), ("CH4", (0.001, 0.005)), ("NH3", (0.0001, 0.001))),
    (1.0, 1.0),   # 1-bar reference level
)
ICE_GIANT_MIX = AtmosphereTemplate(
    "ice-giant",
    (("H2", (0.70, 0.82)), ("He", (0.15, 0.20)), ("CH4", (0.015, 0.04)), ("H2O", (0.001, 0.01))),
    (1.0, 1.0),
)
HOT_STRIPPED = AtmosphereTemplate(
    "hot-stripped",
    (("CO2", (0.90, 0.98)), ("N2", (0.01, 0.05)), ("SO2", (0.005, 0.03))),
    (0.001, 0.1),
)
EARTH_LIKE = AtmosphereTemplate(
    "earth-like",
    (("N2", (0.75, 0.80)), ("O2", (0.18, 0.22)), ("Ar", (0.005, 0.012)),
     ("CO2", (0.0003, 0.001)), ("H2O", (0.001, 0.03))),
    (0.5, 2.0),
)
VENUS_LIKE = AtmosphereTemplate(
    "venus-like",
    (("CO2", (0.94, 0.97)), ("N2", (0.03, 0.05)), ("SO2", (0.0001, 0.0003))),
    (40.0, 100.0),
)
MARS_LIKE = AtmosphereTemplate(
    "mars-like",
    (("CO2", (0.94, 0.96)), ("N2", (0.02, 0.03)), ("Ar", (0.015, 0.02))),
    (0.004, 0.012),
)
TITAN_LIKE = AtmosphereTemplate(
    "titan-like",
    (("N2", (0.94, 0.98)), ("CH4", (0.014, 0.05)), ("H2", (0.001, 0.002))),
    (1.0, 1.6),
)

GASEOUS_TEMPLATES: Dict[SizeCategory, AtmosphereTemplate] = {
    SizeCategory.GAS_GIANT: HYDROGEN_HELIUM,
    SizeCategory.ICE_GIANT: ICE_GIANT_MIX,
}

ROCKY_TEMPLATES: Dict[OrbitZone, List[Tuple[AtmosphereTemplate, float]]] = {
    OrbitZone.HOT: [(HOT_STRIPPED, 1.0)],
    OrbitZone.TEMPERATE: [(EARTH_LIKE, 0.4), (VENUS_LIKE, 0.3), (MARS_LIKE, 0.3)],
    OrbitZone.COLD: [(TITAN_LIKE, 1.0)],
}

# Equilibrium temperatures that override the nominal zone [K]
HOT_MIX_MIN_K = 500.0
COLD_MIX_MAX_K = 100.0


def composition_zone(zone: OrbitZone, t_eq_k: float) -> OrbitZone:
    if t_eq_k > HOT_MIX_MIN_K:
        return OrbitZone.HOT
    if t_eq_k < COLD_MIX_MAX_K:
        return OrbitZone.COLD
    return zone


def pick_template(
    size_category: SizeCategory,
    zone: OrbitZone,
    t_eq_k: float,
    rng: RandomStream,
) -> AtmosphereTemplate:
    """Gaseous bodies: by size (no draw). Rocky: by zone; one draw when several fit."""
    if size_category.is_gaseous:
        return GASEOUS_TEMPLATES[size_category]
    options = ROCKY_TEMPLATES[composition_zone(zone, t_eq_k)]
    if len(options) == 1:
        return options[0][0]
    return rng.weighted_choice(options)


# ============================================================
# Mix helpers
# ============================================================

def normalize(fractions: Mapping[str, float]) -> Dict[str, float]:
    total = sum(fractions.values())
    if total <= 0.0:
        raise ValueError("cannot normalise an empty mix.")
    return {k: v / total for k, v in fractions.items()}


def sample_mix(template: AtmosphereTemplate, rng: RandomStream) -> Dict[str, float]:
    return normalize({gas: rng.range(lo, hi) for gas, (lo, hi) in template.gases})


def mean_molecular_weight(composition: Mapping[str, float]) -> float:
    return sum(f * GAS_MOLAR_MASS_AMU[gas] for gas, f in composition.items())


__all__ = [
    "AtmosphereTemplate",
    "HYDROGEN_HELIUM", "ICE_GIANT_MIX", "HOT_STRIPPED",
    "EARTH_LIKE", "VENUS_LIKE", "MARS_LIKE", "TITAN_LIKE",
    "GASEOUS_TEMPLATES", "ROCKY_TEMPLATES",
    "composition_zone", "pick_template",
    "normalize", "sample_mix", "mean_molecular_weight",
]
