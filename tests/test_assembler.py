# tests/test_assembler.py
import dataclasses
import logging

import pytest

from planetgen.assembly import (
    BodyAssembler,
    generate_asteroid,
    generate_moon,
    generate_planet,
    replay,
    select_archetype,
    verify,
)
from planetgen.core import (
    BodyKind,
    CelestialBody,
    OrbitalOverrides,
    OrbitZone,
    PhysicalOverrides,
    RandomStream,
    SizeCategory,
    SurfaceOverrides,
    asteroid_spec,
    context_from_body,
    moon_spec,
    nominal_density,
    planet_spec,
)
from planetgen.core.archetypes import ASTEROID_LARGE_MASS_KG, ASTEROID_SMALL_MASS_KG
from planetgen.core.constants import AU_M, M_EARTH_KG
from planetgen.orbital import moon_orbit_band

EARTH_LIKE_KEYS = {"N2", "O2", "Ar", "CO2", "H2O"}
VENUS_LIKE_KEYS = {"CO2", "N2", "SO2"}
MARS_LIKE_KEYS = {"CO2", "N2", "Ar"}


# ============================================================
# Determinism and identity
# ============================================================

def test_same_seed_same_body(assembler, sun):
    spec = planet_spec(2024)
    assert assembler.generate(spec, sun) == assembler.generate(spec, sun)


def test_timestamp_is_not_part_of_equality(sun, config):
    spec = planet_spec(5)
    first = BodyAssembler(config).generate(spec, sun)
    later = BodyAssembler(dataclasses.replace(config, clock=lambda: "2099-01-01T00:00:00+00:00")).generate(spec, sun)
    assert first.provenance.timestamp == config.clock()
    assert first == later


def test_different_seeds_differ(assembler, sun):
    a = assembler.generate(planet_spec(1), sun)
    b = assembler.generate(planet_spec(2), sun)
    assert a.id != b.id
    assert a.physical != b.physical


def test_provenance_records_stream_start(assembler, sun):
    rng = RandomStream(77)
    rng.skip(40)
    body = assembler.generate(planet_spec(0), sun, rng)
    assert body.provenance.seed == 77
    assert body.provenance.stream_position == 40
    assert body.provenance.generator_version == assembler.config.generator_version
    assert body.provenance.spec["kind"] == "planet"


def test_name_hint_is_used(assembler, sun):
    assert assembler.generate(planet_spec(3, name_hint="Tellus"), sun).name == "Tellus"


def test_generated_names_follow_kind(assembler, sun, jupiter):
    moon = assembler.generate(moon_spec(3), jupiter)
    asteroid = assembler.generate(asteroid_spec(3), sun)
    assert moon.name.split()[-1] in {"I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII"}
    assert asteroid.name.startswith("(")


# ============================================================
# Override precedence
# ============================================================

def test_overrides_always_win(assembler, sun):
    spec = planet_spec(
        11,
        size_category=SizeCategory.SUPER_EARTH,
        zone=OrbitZone.HOT,
        orbital=OrbitalOverrides(semi_major_axis_m=0.3 * AU_M, eccentricity=0.07),
        physical=PhysicalOverrides(mass_kg=5 * M_EARTH_KG, axial_tilt_deg=12.0),
        surface=SurfaceOverrides(albedo=0.42),
    )
    for seed in range(10):
        body = assembler.generate(dataclasses.replace(spec, seed=seed), sun)
        assert body.size_category is SizeCategory.SUPER_EARTH
        assert body.zone is OrbitZone.HOT
        assert body.orbital.semi_major_axis_m == 0.3 * AU_M
        assert body.orbital.eccentricity == 0.07
        assert body.physical.mass_kg == 5 * M_EARTH_KG
        assert body.physical.axial_tilt_deg == 12.0
        assert body.surface.albedo == 0.42


def test_pinned_archetype_skips_its_rolls(sun):
    free, pinned = RandomStream(4), RandomStream(4)
    select_archetype(planet_spec(4), sun, free)
    select_archetype(planet_spec(4, size_category=SizeCategory.DWARF, zone=OrbitZone.COLD), sun, pinned)
    assert free.position == 2
    assert pinned.position == 0


# ============================================================
# Scenarios
# ============================================================

def test_forced_temperate_terrestrial_atmosphere(assembler, sun):
    spec = planet_spec(
        42, size_category=SizeCategory.TERRESTRIAL, zone=OrbitZone.TEMPERATE, has_atmosphere=True
    )
    body = assembler.generate(spec, sun)
    atm = body.atmosphere
    assert atm is not None
    assert set(atm.composition) in (EARTH_LIKE_KEYS, VENUS_LIKE_KEYS, MARS_LIKE_KEYS)
    assert sum(atm.composition.values()) == pytest.approx(1.0)


def test_captured_moons_can_be_retrograde(assembler, jupiter):
    retrograde = 0
    for seed in range(200):
        captured = assembler.generate(moon_spec(seed, captured=True), jupiter)
        regular = assembler.generate(moon_spec(seed), jupiter)
        assert regular.orbital.inclination_deg <= 5.0
        if captured.orbital.inclination_deg > 90.0:
            retrograde += 1
    assert retrograde > 0


def test_asteroid_mass_tables_never_overlap(assembler, sun):
    small_max, large_min = 0.0, float("inf")
    for seed in range(200):
        small = assembler.generate(asteroid_spec(seed), sun).physical.mass_kg
        large = assembler.generate(asteroid_spec(seed, is_large=True), sun).physical.mass_kg
        assert ASTEROID_SMALL_MASS_KG[0] <= small <= ASTEROID_SMALL_MASS_KG[1]
        assert ASTEROID_LARGE_MASS_KG[0] <= large <= ASTEROID_LARGE_MASS_KG[1]
        small_max, large_min = max(small_max, small), min(large_min, large)
    assert small_max < large_min


# ============================================================
# Moons
# ============================================================

@pytest.mark.parametrize("captured", [False, True])
def test_moon_mass_and_orbit_containment(assembler, jupiter, earth, captured):
    for parent in (jupiter, earth):
        for seed in range(100):
            body = assembler.generate(moon_spec(seed, captured=captured), parent)
            assert body.physical.mass_kg <= 0.1 * parent.mass_kg
            lo, hi = moon_orbit_band(parent, nominal_density(body.size_category), captured=captured)
            assert lo <= body.orbital.semi_major_axis_m <= hi
            assert body.rings is None


def test_moon_zone_follows_parent(assembler, jupiter):
    assert assembler.generate(moon_spec(1), jupiter).zone is OrbitZone.COLD


def test_moon_around_star_returns_none(assembler, sun, caplog):
    with caplog.at_level(logging.WARNING, logger="planetgen.assembly.assembler"):
        assert assembler.generate(moon_spec(1), sun) is None
    assert "moon" in caplog.text


def test_moons_of_a_generated_planet(assembler, sun):
    planet = assembler.generate(planet_spec(8, size_category=SizeCategory.GAS_GIANT, zone=OrbitZone.COLD), sun)
    context = context_from_body(planet, sun)
    moon = assembler.generate(moon_spec(8), context)
    assert moon is not None
    assert context.parent_id == planet.id


# ============================================================
# Convenience entry points
# ============================================================

def test_kind_specific_entry_points(sun, jupiter, config):
    assert generate_planet(planet_spec(1), sun, config=config).kind is BodyKind.PLANET
    assert generate_moon(moon_spec(1), jupiter, config=config).kind is BodyKind.MOON
    assert generate_asteroid(asteroid_spec(1), sun, config=config).kind is BodyKind.ASTEROID
    with pytest.raises(ValueError):
        generate_planet(moon_spec(1), sun)


# ============================================================
# Save / load / replay
# ============================================================

def test_materialized_body_reloads(assembler, sun):
    body = assembler.generate(planet_spec(31, size_category=SizeCategory.GAS_GIANT, has_rings=True), sun)
    assert CelestialBody.from_dict(body.to_dict()) == body


@pytest.mark.parametrize("mass", ["heavy", None, -1.0])
def test_corrupt_saved_body_is_a_value_error(assembler, sun, mass):
    data = assembler.generate(planet_spec(31), sun).to_dict()
    data["physical"]["mass_kg"] = mass
    with pytest.raises(ValueError):
        CelestialBody.from_dict(data)


def test_saved_body_with_unknown_keys_is_rejected(assembler, sun):
    data = assembler.generate(planet_spec(31), sun).to_dict()
    data["orbital"]["period_days"] = 365.0
    with pytest.raises(ValueError):
        CelestialBody.from_dict(data)


def test_replay_reproduces_body(assembler, sun, jupiter):
    for spec, context in ((planet_spec(9), sun), (moon_spec(9, captured=True), jupiter), (asteroid_spec(9), sun)):
        rng = RandomStream(1000)
        rng.skip(25)
        body = assembler.generate(spec, context, rng)
        assert replay(body.provenance, context, assembler.config) == body
        assert verify(body, context, assembler.config)


def test_verify_ignores_assigned_parent(assembler, jupiter):
    body = assembler.generate(moon_spec(12), jupiter)
    linked = dataclasses.replace(body, orbital=dataclasses.replace(body.orbital, parent_id="jupiter"))
    assert verify(linked, jupiter, assembler.config)


def test_verify_detects_tampering(assembler, sun):
    body = assembler.generate(planet_spec(13), sun)
    tampered = dataclasses.replace(body, physical=dataclasses.replace(body.physical, mass_kg=body.physical.mass_kg * 2))
    assert not verify(tampered, sun, assembler.config)
