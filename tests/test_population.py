# tests/test_population.py
import pytest

from planetgen.assembly import FRAME_COLUMNS, generate_population, population_frame
from planetgen.core import asteroid_spec, derive_seed, moon_spec, planet_spec

SPECS = [planet_spec(), planet_spec(), asteroid_spec(), asteroid_spec(is_large=True), planet_spec()]


def test_population_is_deterministic(sun, config):
    first = generate_population(SPECS, sun, master_seed=7, config=config)
    again = generate_population(SPECS, sun, master_seed=7, config=config)
    assert first == again
    assert len(first) == len(SPECS)


def test_each_body_gets_its_own_derived_stream(sun, config):
    bodies = generate_population(SPECS, sun, master_seed=7, config=config)
    assert [b.provenance.seed for b in bodies] == [derive_seed(7, i) for i in range(len(SPECS))]
    shorter = generate_population(SPECS[:3], sun, master_seed=7, config=config)
    assert shorter == bodies[:3]


def test_failed_bodies_are_left_out(sun, config):
    bodies = generate_population([planet_spec(), moon_spec(), planet_spec()], sun, master_seed=1, config=config)
    assert len(bodies) == 2


def test_per_spec_contexts(sun, jupiter, config):
    bodies = generate_population([planet_spec(), moon_spec()], [sun, jupiter], master_seed=3, config=config)
    assert [b.kind.value for b in bodies] == ["planet", "moon"]
    with pytest.raises(ValueError):
        generate_population([planet_spec()], [sun, jupiter], master_seed=3)


def test_population_frame(sun, config):
    bodies = generate_population(SPECS, sun, master_seed=11, config=config)
    frame = population_frame(bodies)
    assert list(frame.columns) == FRAME_COLUMNS
    assert len(frame) == len(bodies)
    assert list(frame["kind"]) == ["planet", "planet", "asteroid", "asteroid", "planet"]
    assert frame["mass_earth"].gt(0).all()
    assert frame.loc[frame["kind"] == "asteroid", "ring_bands"].eq(0).all()


def test_empty_population_frame():
    frame = population_frame([])
    assert frame.empty
    assert list(frame.columns) == FRAME_COLUMNS
