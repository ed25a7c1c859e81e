import io
import json

import pytest

from farhorizons import rng
from farhorizons.enums import GasType, PlanetSpecialType, StarColor, StarType
from farhorizons.planet import GasData, PlanetData
from farhorizons.species import SpeciesData
from farhorizons.star import StarData, generate_star, xyz_to_id


@pytest.fixture(autouse=True)
def _seeded():
    rng.seed(20210401)


def _planet(**kwargs):
    values = dict(
        diameter=13,
        gravity=100,
        temperature_class=11,
        pressure_class=9,
        mining_difficulty=250,
        gases=[GasData(GasType.O2, 20), GasData(GasType.N2, 80)],
    )
    values.update(kwargs)
    return PlanetData(**values)


def test_xyz_to_id_is_zero_padded():
    assert xyz_to_id(1, 2, 3) == "001/002/003"
    assert xyz_to_id(12, 0, 40) == "012/000/040"


def test_generate_star_invariants():
    for i in range(20):
        star = generate_star(i, 2 * i, 3, 5)
        assert star.id == xyz_to_id(i, 2 * i, 3)
        assert 1 <= star.num_planets <= 9
        assert len(star.planets) == star.num_planets
        assert 0 <= star.size <= 9
        assert star.type in StarType
        assert star.color in StarColor
        assert star.planet_index == -1
        assert all(p.id.startswith(star.id + "-") for p in star.planets)


def test_generate_star_is_deterministic():
    rng.seed(7)
    first = generate_star(4, 5, 6, 3).to_dict()
    rng.seed(7)
    second = generate_star(4, 5, 6, 3).to_dict()
    assert first == second


def test_generate_star_prints_progress(capsys):
    star = generate_star(1, 2, 3, 1)
    out = capsys.readouterr().out
    assert "Generating star (  1,   2,   3)\n" in out
    assert f"(planets {star.num_planets})" in out


def test_round_trip_through_json():
    star = generate_star(7, 8, 9, 2)
    star.visited_by["SP01"] = True
    restored = StarData.from_dict(json.loads(json.dumps(star.to_dict())))
    assert restored == star


def test_to_dict_uses_labels():
    star = generate_star(1, 2, 3, 1)
    data = star.to_dict()
    assert data["id"] == "001/002/003"
    assert data["Type"] == star.type.label()
    assert data["Color"] == star.color.label()


def test_at():
    star = StarData(x=3, y=4, z=5)
    assert star.at(3, 4, 5)
    assert not star.at(3, 4, 6)


def test_distance_squared():
    a = StarData(x=0, y=0, z=0)
    b = StarData(x=3, y=4, z=0)
    assert a.distance_squared_to(b) == 25
    assert b.distance_squared_to(a) == a.distance_squared_to(b)
    assert a.distance_squared_to(a) == 0


def test_home_planet_index_and_number():
    star = StarData(
        planets=[_planet(), _planet(special=PlanetSpecialType.IDEAL_HOME_PLANET)]
    )
    assert star.home_planet_index() == 1
    assert star.home_planet_number() == 2
    empty = StarData(planets=[_planet()])
    assert empty.home_planet_index() == -1
    assert empty.home_planet_number() == 0


def test_convert_to_home_system():
    template = [
        _planet(
            gases=[
                GasData(GasType.H2, 10),
                GasData(GasType.N2, 60),
                GasData(GasType.O2, 30),
            ]
        ),
        _planet(temperature_class=20, pressure_class=0),
    ]
    before = [p.to_dict() for p in template]
    star = StarData(planets=[PlanetData(), PlanetData(), PlanetData()])

    star.convert_to_home_system(template)

    assert star.home_system
    assert len(star.planets) == 3
    assert [p.to_dict() for p in template] == before
    assert star.planets[0] is not template[0]

    first = star.planets[0]
    assert sum(g.percentage for g in first.gases) == 100
    assert 11 <= 60 - first.gases[1].percentage <= 35
    assert first.temperature_class - 11 in (0, 1, 2)
    assert first.diameter - 13 in (-2, -1, 0)
    assert 1 <= first.gravity - 100 <= 10
    assert 1 <= 250 - first.mining_difficulty <= 10

    second = star.planets[1]
    assert 20 - second.temperature_class in (0, 1, 2)
    assert second.pressure_class == 0


def test_scan_without_species():
    star = StarData(
        x=1, y=2, z=3, type=StarType.MAIN_SEQUENCE, color=StarColor.YELLOW, size=5,
        num_planets=1, planets=[_planet()],
    )
    out = io.StringIO()
    star.scan(out, None)
    text = out.getvalue()
    assert text.startswith("Coordinates:\tx = 1\ty = 2\tz = 3\tstellar type =  G5   1 planets.\n\n")
    assert "  #  Dia  Grav Class Class  Diff  LSN  Atmosphere\n" in text
    assert text.endswith("  1   13  1.00  11     9    2.50   99  O2(20%),N2(80%)\n")
    assert "wormhole" not in text


def test_scan_with_species_and_wormhole():
    home = _planet()
    species = SpeciesData(
        name="Tester", home_planet=home, required_gas=GasType.O2,
        required_gas_min=10, required_gas_max=30,
    )
    star = StarData(
        type=StarType.GIANT, color=StarColor.RED, size=2, num_planets=2,
        worm_here=True, planets=[_planet(), _planet(gases=[])],
    )
    out = io.StringIO()
    star.scan(out, species)
    text = out.getvalue()
    assert "This star system is the terminus of a natural wormhole.\n\n" in text
    assert "   0  O2(20%),N2(80%)\n" in text
    assert "No atmosphere\n" in text


def test_scan_nova():
    star = StarData(num_planets=0)
    out = io.StringIO()
    star.scan(out)
    text = out.getvalue()
    assert "This star is a nova remnant." in text
    assert "blown away.\n\n" in text