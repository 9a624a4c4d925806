# tests/test_physical.py
import pytest

from planetgen.core import (
    Archetype,
    BodyKind,
    GeneratorConfig,
    OrbitalOverrides,
    OrbitZone,
    PhysicalOverrides,
    RandomStream,
    SizeCategory,
)
from planetgen.core.archetypes import SIZE_TABLE
from planetgen.core.bodies import IO, JUPITER
from planetgen.core.constants import M_EARTH_KG, R_EARTH_M, density_from_mass_radius
from planetgen.core.spec import moon_spec, planet_spec
from planetgen.orbital import ORBITAL_GENERATORS
from planetgen.physical import (
    MOON_MAX_PARENT_MASS_FRACTION,
    PHYSICAL_GENERATORS,
    magnetic_moment,
    oblateness,
    radiogenic_heat,
    tidal_heating,
)
from planetgen.physical.interior import EARTH_HEAT_FLOW_W, MAX_TIDAL_HEAT_W
from planetgen.physical.rotation import MAX_OBLATENESS, rotation_band_h

CONFIG = GeneratorConfig()


def _generate(spec, archetype, context, seed):
    rng = RandomStream(seed)
    orbital = ORBITAL_GENERATORS[spec.kind].generate(spec, archetype, context, rng)
    return orbital, PHYSICAL_GENERATORS[spec.kind].generate(spec, archetype, context, orbital, rng, CONFIG)


def test_planet_mass_and_density_from_archetype(sun):
    archetype = Archetype(kind=BodyKind.PLANET, zone=OrbitZone.TEMPERATE, size_category=SizeCategory.TERRESTRIAL)
    table = SIZE_TABLE[SizeCategory.TERRESTRIAL]
    for seed in range(50):
        _, phys = _generate(planet_spec(seed), archetype, sun, seed)
        assert table.mass_kg[0] <= phys.mass_kg <= table.mass_kg[1]
        assert table.density_kg_m3[0] <= phys.density_kg_m3 <= table.density_kg_m3[1]
        assert density_from_mass_radius(phys.mass_kg, phys.radius_m) == pytest.approx(phys.density_kg_m3)
        assert 0.0 <= phys.oblateness <= MAX_OBLATENESS


def test_moon_mass_capped_by_parent(earth):
    # terrestrial moons would outweigh 10% of an Earth-mass parent
    archetype = Archetype(kind=BodyKind.MOON, zone=OrbitZone.TEMPERATE, size_category=SizeCategory.TERRESTRIAL)
    for seed in range(50):
        _, phys = _generate(moon_spec(seed), archetype, earth, seed)
        assert phys.mass_kg <= MOON_MAX_PARENT_MASS_FRACTION * earth.mass_kg


def test_close_moon_is_tidally_locked(jupiter):
    archetype = Archetype(kind=BodyKind.MOON, zone=OrbitZone.COLD, size_category=SizeCategory.DWARF)
    spec = moon_spec(3, orbital=OrbitalOverrides(semi_major_axis_m=IO.semi_major_axis_m, eccentricity=IO.eccentricity))
    orbital, phys = _generate(spec, archetype, jupiter, 3)
    assert phys.tidally_locked
    assert phys.rotation_period_s == orbital.orbital_period_s
    assert 0.0 <= phys.axial_tilt_deg <= 10.0
    assert phys.tidal_heating_w > 0.0
    assert phys.internal_heat_w >= phys.tidal_heating_w


@pytest.mark.parametrize("pinned_heat", [0.0, 1.0e10, 1.0e20])
def test_pinned_heat_bounds_the_tidal_part(jupiter, pinned_heat):
    archetype = Archetype(kind=BodyKind.MOON, zone=OrbitZone.COLD, size_category=SizeCategory.DWARF)
    spec = moon_spec(
        3,
        orbital=OrbitalOverrides(semi_major_axis_m=IO.semi_major_axis_m, eccentricity=IO.eccentricity),
        physical=PhysicalOverrides(internal_heat_w=pinned_heat),
    )
    _, phys = _generate(spec, archetype, jupiter, 3)
    assert phys.internal_heat_w == pinned_heat
    assert 0.0 <= phys.tidal_heating_w <= phys.internal_heat_w


def test_pinned_radius_sets_density(sun):
    archetype = Archetype(kind=BodyKind.PLANET, zone=OrbitZone.TEMPERATE, size_category=SizeCategory.TERRESTRIAL)
    ov = PhysicalOverrides(mass_kg=M_EARTH_KG, radius_m=R_EARTH_M, rotation_period_s=-86400.0)
    _, phys = _generate(planet_spec(4, physical=ov), archetype, sun, 4)
    assert phys.mass_kg == M_EARTH_KG
    assert phys.radius_m == R_EARTH_M
    assert phys.density_kg_m3 == pytest.approx(5514.0, rel=0.01)
    assert phys.rotation_period_s == -86400.0
    assert phys.is_retrograde


def test_oblateness_limits():
    assert oblateness(0.0, R_EARTH_M, M_EARTH_KG, 0.3) == 0.0
    # a wildly fast spin saturates
    assert oblateness(600.0, 7.0e7, 1.9e27, 0.8) == MAX_OBLATENESS
    earth_like = oblateness(86164.0, R_EARTH_M, M_EARTH_KG, 0.3)
    assert 0.0 < earth_like < 0.01


def test_rotation_bands_favour_fast_giants():
    giant = rotation_band_h(300 * M_EARTH_KG)
    dwarf = rotation_band_h(0.001 * M_EARTH_KG)
    assert giant[1] < dwarf[1]


def test_no_dynamo_below_threshold_consumes_nothing():
    rng = RandomStream(0)
    assert magnetic_moment(0.01 * M_EARTH_KG, 86400.0, 0.15, rng) == 0.0
    assert magnetic_moment(M_EARTH_KG, 200 * 86400.0, 0.15, rng) == 0.0
    assert rng.position == 0


def test_dead_dynamo_certain():
    rng = RandomStream(0)
    assert magnetic_moment(M_EARTH_KG, 86400.0, 1.0, rng) == 0.0
    assert rng.position == 1


def test_live_dynamo_is_earth_scale():
    rng = RandomStream(0)
    moment = magnetic_moment(M_EARTH_KG, 86164.1, 0.0, rng)
    assert 4.0e22 <= moment <= 1.6e23
    assert rng.position == 2


def test_radiogenic_heat_calibrated_on_earth():
    assert radiogenic_heat(M_EARTH_KG, 4.5) == pytest.approx(EARTH_HEAT_FLOW_W)
    assert radiogenic_heat(M_EARTH_KG, 9.0) < radiogenic_heat(M_EARTH_KG, 4.5)


def test_tidal_heating_calibrated_on_io():
    io = tidal_heating(JUPITER.mass_kg, IO.radius_m, IO.eccentricity, IO.semi_major_axis_m)
    assert io == pytest.approx(1.0e14)
    assert tidal_heating(JUPITER.mass_kg, IO.radius_m, 0.0, IO.semi_major_axis_m) == 0.0
    assert tidal_heating(JUPITER.mass_kg, IO.radius_m, 0.5, 1.0e8) == MAX_TIDAL_HEAT_W
