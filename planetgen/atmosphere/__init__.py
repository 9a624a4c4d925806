"""
Atmospheres
===========

Jeans-escape retention, gas composition templates, surface pressure,
scale height and greenhouse coupling.
"""

from .composition import AtmosphereTemplate, mean_molecular_weight, normalize, pick_template
from .generator import (
    PRESENCE_CHANCE,
    AtmosphereGenerator,
    greenhouse_factor,
    nominal_albedo,
    scale_height,
)
from .retention import (
    jeans_parameter,
    jeans_threshold,
    lightest_retained_gas,
    retains_atmosphere,
    thermal_velocity,
)

__all__ = [
    "AtmosphereGenerator",
    "AtmosphereTemplate",
    "PRESENCE_CHANCE",
    "greenhouse_factor",
    "nominal_albedo",
    "scale_height",
    "mean_molecular_weight",
    "normalize",
    "pick_template",
    "jeans_parameter",
    "jeans_threshold",
    "lightest_retained_gas",
    "retains_atmosphere",
    "thermal_velocity",
]
