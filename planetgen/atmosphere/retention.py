# planetgen/atmosphere/retention.py
"""
Jeans-escape retention test.

    lambda = v_esc / v_th,   v_th = sqrt(2 k T / m_gas)

A gas is retained when lambda exceeds the category threshold. A body
keeps an atmosphere when at least one candidate gas is retained; gaseous
bodies keep theirs unconditionally. lambda grows with v_esc for every
gas, so raising escape velocity can only keep or gain an atmosphere.
"""

from __future__ import annotations

import math
from typing import Optional

from planetgen.core.archetypes import SizeCategory
from planetgen.core.constants import AMU_KG, GAS_MOLAR_MASS_AMU, K_B

JEANS_THRESHOLDS = {
    SizeCategory.DWARF: 10.0,
    SizeCategory.SUB_TERRESTRIAL: 6.0,
    SizeCategory.TERRESTRIAL: 5.0,
    SizeCategory.SUPER_EARTH: 4.0,
}

_GASES_BY_MASS = sorted(GAS_MOLAR_MASS_AMU.items(), key=lambda kv: kv[1])


def thermal_velocity(temperature_k: float, molar_mass_amu: float) -> float:
    """Most probable molecular speed [m/s]."""
    if temperature_k <= 0.0:
        return 0.0
    return math.sqrt(2.0 * K_B * temperature_k / (molar_mass_amu * AMU_KG))


def jeans_parameter(escape_velocity_m_s: float, temperature_k: float, molar_mass_amu: float) -> float:
    v_th = thermal_velocity(temperature_k, molar_mass_amu)
    if v_th <= 0.0:
        return math.inf
    return escape_velocity_m_s / v_th


def jeans_threshold(size_category: Optional[SizeCategory]) -> float:
    """Asteroids (no size category) use the dwarf threshold."""
    return JEANS_THRESHOLDS.get(size_category, JEANS_THRESHOLDS[SizeCategory.DWARF])


def lightest_retained_gas(escape_velocity_m_s: float, temperature_k: float, threshold: float) -> Optional[str]:
    for gas, mu in _GASES_BY_MASS:
        if jeans_parameter(escape_velocity_m_s, temperature_k, mu) > threshold:
            return gas
    return None


def retains_atmosphere(
    escape_velocity_m_s: float,
    temperature_k: float,
    size_category: Optional[SizeCategory],
) -> bool:
    if size_category is not None and size_category.is_gaseous:
        return True
    return lightest_retained_gas(escape_velocity_m_s, temperature_k, jeans_threshold(size_category)) is not None


__all__ = [
    "JEANS_THRESHOLDS",
    "thermal_velocity",
    "jeans_parameter",
    "jeans_threshold",
    "lightest_retained_gas",
    "retains_atmosphere",
]
