# tests/test_context.py
import math

import pytest

from planetgen.core import ParentContext, PreconditionError, star_context
from planetgen.core.bodies import JUPITER
from planetgen.core.constants import AU_M, M_SUN_KG, hill_radius


def test_star_context_has_unbounded_hill_sphere(sun):
    assert sun.is_star
    assert not sun.is_gaseous
    assert math.isinf(sun.hill_radius_m())


def test_planet_hill_radius(jupiter):
    expected = hill_radius(JUPITER.semi_major_axis_m, JUPITER.eccentricity, JUPITER.mass_kg, M_SUN_KG)
    assert jupiter.hill_radius_m() == pytest.approx(expected)
    assert jupiter.is_gaseous


def test_earth_is_not_a_gaseous_parent(earth):
    assert not earth.is_star
    assert not earth.is_gaseous


def test_hill_radius_needs_star_mass():
    orphan = ParentContext(
        name="orphan", mass_kg=1.0e25, radius_m=6.0e6, luminosity_w=3.8e26,
        age_gyr=4.6, semi_major_axis_m=AU_M,
    )
    with pytest.raises(PreconditionError):
        orphan.hill_radius_m()


def test_earth_equilibrium_temperature(sun):
    t = sun.equilibrium_temperature(0.3, AU_M)
    assert t == pytest.approx(255.0, abs=2.0)


def test_teff_form_agrees_with_luminosity_form():
    by_lum = star_context()
    by_teff = star_context(teff_k=5772.0)
    assert by_teff.equilibrium_temperature(0.3, AU_M) == pytest.approx(
        by_lum.equilibrium_temperature(0.3, AU_M), rel=0.01
    )


def test_star_temperature_needs_a_distance(sun):
    with pytest.raises(PreconditionError):
        sun.equilibrium_temperature(0.3)


def test_body_temperature_uses_parent_orbit_for_moons(earth):
    # a moon's own semi-major axis is around the planet, not the star
    assert earth.body_temperature(0.3, 4.0e8) == earth.equilibrium_temperature(0.3)


def test_cooler_farther_out(sun):
    assert sun.equilibrium_temperature(0.3, 5 * AU_M) < sun.equilibrium_temperature(0.3, AU_M)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"mass_kg": 0.0},
        {"radius_m": -1.0},
        {"luminosity_w": -1.0},
        {"age_gyr": -0.1},
        {"eccentricity": 1.0},
    ],
)
def test_invalid_context_rejected(kwargs):
    base = dict(name="x", mass_kg=1.0e30, radius_m=7.0e8, luminosity_w=3.8e26, age_gyr=4.6)
    base.update(kwargs)
    with pytest.raises(ValueError):
        ParentContext(**base)
