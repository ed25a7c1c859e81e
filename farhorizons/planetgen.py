"""Generation of the planets orbiting a star."""

from __future__ import annotations

from farhorizons import rng
from farhorizons.enums import GasType, PlanetSpecialType
from farhorizons.planet import GasData, PlanetData, lsn

# Starting (diameter, temperature class) values from Earth's solar system,
# with an asteroid belt in fifth place and Pluto left out. Index 0 is unused.
_EARTH = (
    (0, 0),
    (5, 29),  # Mercury
    (12, 27),  # Venus
    (13, 11),  # Earth
    (7, 9),  # Mars
    (20, 8),  # Asteroid belt
    (143, 6),  # Jupiter
    (121, 5),  # Saturn
    (51, 5),  # Uranus
    (49, 3),  # Neptune
)


def _start_offset(num_planets: int, planet_number: int) -> int:
    if num_planets <= 3:
        return 2 * planet_number + 1
    return 9 * planet_number // num_planets


def _rough_planet(star_id: str, num_planets: int, planet_number: int) -> tuple[PlanetData, bool]:
    """Roll diameter, density, gravity and temperature; return the planet and gas-giant flag."""
    planet = PlanetData(id=f"{star_id}-{planet_number:02d}")
    base_diameter, base_temperature = _EARTH[_start_offset(num_planets, planet_number)]
    planet.diameter = planet.generate_diameter(base_diameter)
    planet.temperature_class = base_temperature

    gas_giant = planet.diameter > 40
    planet.density = planet.generate_density(gas_giant)
    # "g" is proportional to density times diameter; 72 makes Earth come out at 100.
    planet.gravity = planet.density * planet.diameter // 72
    planet.temperature_class = planet.generate_temperature_class(
        num_planets, planet_number, gas_giant, base_temperature
    )
    return planet, gas_giant


def _finish_planet(planet: PlanetData, gas_giant: bool, earth_like: bool) -> None:
    planet.pressure_class = planet.generate_pressure_class(
        planet.gravity, planet.temperature_class, gas_giant
    )
    planet.gases.extend(planet.generate_gases(planet.pressure_class, planet.temperature_class))
    planet.mining_difficulty = planet.generate_mining_difficulty(planet.diameter, earth_like)


def _make_earth_like(planet: PlanetData) -> None:
    planet.diameter = 11 + rng.roll(3)
    planet.gravity = 93 + rng.roll(11) + rng.roll(11) + rng.roll(5)
    planet.temperature_class = 9 + rng.roll(3)
    planet.pressure_class = 8 + rng.roll(3)
    planet.mining_difficulty = 208 + rng.roll(11) + rng.roll(11)
    planet.special = PlanetSpecialType.IDEAL_HOME_PLANET

    remaining = 100
    if rng.roll(3) == 1:
        ammonia = GasData(GasType.NH3, rng.roll(30))
        planet.gases.append(ammonia)
        remaining -= ammonia.percentage
    if rng.roll(3) == 1:
        carbon_dioxide = GasData(GasType.CO2, rng.roll(30))
        planet.gases.append(carbon_dioxide)
        remaining -= carbon_dioxide.percentage
    oxygen = GasData(GasType.O2, rng.roll(20) + 10)
    planet.gases.append(oxygen)
    remaining -= oxygen.percentage
    planet.gases.append(GasData(GasType.N2, remaining))


def generate_earth_like_planet(star_id: str, num_planets: int) -> list[PlanetData] | None:
    """Try to roll a system holding one Earth-like home planet.

    Return the planets, or None if no suitable home planet came up or
    the system fails the home-system potential test.
    """
    planets: list[PlanetData] = []
    home: PlanetData | None = None

    for planet_number in range(1, num_planets + 1):
        planet, gas_giant = _rough_planet(star_id, num_planets, planet_number)
        planets.append(planet)

        if home is None and planet.temperature_class <= 11:
            home = planet
            _make_earth_like(planet)
            continue

        _finish_planet(planet, gas_giant, earth_like=True)

    if home is None:
        return None

    potential = sum(
        20000 // ((lsn(planet, home) + 3) * (50 + planet.mining_difficulty))
        for planet in planets
    )
    if not 54 <= potential <= 56:
        return None
    return planets


def generate_planet(star_id: str, num_planets: int) -> list[PlanetData]:
    """Roll ``num_planets`` ordinary planets for the star ``star_id``."""
    planets: list[PlanetData] = []
    for planet_number in range(1, num_planets + 1):
        planet, gas_giant = _rough_planet(star_id, num_planets, planet_number)
        _finish_planet(planet, gas_giant, earth_like=False)
        planets.append(planet)
    return planets