# tests/conftest.py
import pytest

from planetgen.assembly import BodyAssembler
from planetgen.core import GeneratorConfig, planet_context, star_context
from planetgen.core.bodies import EARTH, JUPITER

FIXED_TIMESTAMP = "2000-01-01T12:00:00+00:00"


@pytest.fixture
def sun():
    return star_context(mass_msun=1.0, luminosity_lsun=1.0, age_gyr=4.6, name="Sun")


@pytest.fixture
def jupiter(sun):
    return planet_context(
        mass_kg=JUPITER.mass_kg,
        radius_m=JUPITER.radius_m,
        semi_major_axis_m=JUPITER.semi_major_axis_m,
        eccentricity=JUPITER.eccentricity,
        star=sun,
        name="Jupiter",
        parent_id="jupiter",
    )


@pytest.fixture
def earth(sun):
    return planet_context(
        mass_kg=EARTH.mass_kg,
        radius_m=EARTH.radius_m,
        semi_major_axis_m=EARTH.semi_major_axis_m,
        eccentricity=EARTH.eccentricity,
        star=sun,
        name="Earth",
        parent_id="earth",
    )


@pytest.fixture
def config():
    return GeneratorConfig(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def assembler(config):
    return BodyAssembler(config)
