# tests/test_core.py
import pytest

from planetgen.core import (
    AtmosphereOverrides,
    BodyKind,
    BodySpec,
    GeneratorConfig,
    OrbitalOverrides,
    PhysicalOverrides,
    RandomStream,
    RingOverrides,
    SizeCategory,
    SurfaceOverrides,
    default_generator_config,
    planet_spec,
)
from planetgen.core.archetypes import OrbitZone, zone_for_temperature
from planetgen.core.constants import (
    AU_M,
    M_EARTH_KG,
    M_SUN_KG,
    R_EARTH_M,
    SECONDS_PER_YEAR,
    escape_velocity,
    orbital_period,
    radius_from_mass_density,
    roche_limit,
    surface_gravity,
)
from planetgen.core.naming import body_id, generate_name


def test_earth_reference_values():
    assert surface_gravity(M_EARTH_KG, R_EARTH_M) == pytest.approx(9.8, abs=0.05)
    assert escape_velocity(M_EARTH_KG, R_EARTH_M) == pytest.approx(11186.0, rel=0.01)
    assert orbital_period(AU_M, M_SUN_KG) == pytest.approx(SECONDS_PER_YEAR, rel=0.001)


def test_helper_zero_guards():
    assert radius_from_mass_density(M_EARTH_KG, 0.0) == 0.0
    assert escape_velocity(M_EARTH_KG, 0.0) == 0.0
    assert roche_limit(R_EARTH_M, 5500.0, 0.0) == float("inf")


def test_zone_for_temperature():
    assert zone_for_temperature(400.0) is OrbitZone.HOT
    assert zone_for_temperature(280.0) is OrbitZone.TEMPERATE
    assert zone_for_temperature(120.0) is OrbitZone.COLD


def test_spec_round_trips_through_plain_dict():
    spec = planet_spec(
        99,
        name_hint="Vesperine",
        size_category=SizeCategory.SUPER_EARTH,
        has_rings=True,
        orbital=OrbitalOverrides(eccentricity=0.1),
        physical=PhysicalOverrides(mass_kg=3 * M_EARTH_KG),
        atmosphere=AtmosphereOverrides(composition={"N2": 0.8, "O2": 0.2}),
        surface=SurfaceOverrides(albedo=0.3),
        rings=RingOverrides(band_count=2),
    )
    data = spec.to_dict()
    assert data["size_category"] == "super_earth"
    assert BodySpec.from_dict(data) == spec


def test_spec_rejects_unknown_keys():
    data = planet_spec(1).to_dict()
    data["colour"] = "blue"
    with pytest.raises(ValueError):
        BodySpec.from_dict(data)


@pytest.mark.parametrize(
    "path, value",
    [
        (("seed",), "many"),
        (("kind",), "comet"),
        (("orbital", "eccentricity"), 1.5),
        (("rings", "band_count"), "four"),
        (("physical", "spin"), 1.0),
    ],
)
def test_spec_from_dict_rejects_bad_values(path, value):
    data = planet_spec(1).to_dict()
    target = data
    for key in path[:-1]:
        target = target[key]
    target[path[-1]] = value
    with pytest.raises(ValueError):
        BodySpec.from_dict(data)


@pytest.mark.parametrize(
    "factory",
    [
        lambda: OrbitalOverrides(eccentricity=1.2),
        lambda: PhysicalOverrides(mass_kg=-1.0),
        lambda: SurfaceOverrides(albedo=1.5),
        lambda: RingOverrides(band_count=0),
        lambda: BodySpec(kind=BodyKind.PLANET, seed=-3),
        lambda: GeneratorConfig(dead_dynamo_moon=1.5),
        lambda: GeneratorConfig(gap_placement_attempts=0),
    ],
)
def test_invalid_construction_rejected(factory):
    with pytest.raises(ValueError):
        factory()


def test_default_config_carries_package_version():
    from planetgen import __version__

    assert default_generator_config().generator_version == __version__


def test_names_are_seeded():
    assert generate_name(BodyKind.PLANET, RandomStream(5)) == generate_name(BodyKind.PLANET, RandomStream(5))
    rng = RandomStream(5)
    generate_name(BodyKind.ASTEROID, rng)
    assert rng.position == 3


def test_body_id_is_stable():
    assert body_id(BodyKind.MOON, 1, 0) == body_id(BodyKind.MOON, 1, 0)
    assert body_id(BodyKind.MOON, 1, 0) != body_id(BodyKind.MOON, 1, 1)
    assert body_id(BodyKind.MOON, 1, 0) != body_id(BodyKind.PLANET, 1, 0)
