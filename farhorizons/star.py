"""Star systems: generation, home-system conversion and scan reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, TextIO

from farhorizons import rng
from farhorizons.enums import PlanetSpecialType, StarColor, StarType
from farhorizons.planet import PlanetData
from farhorizons.planetgen import generate_planet

if TYPE_CHECKING:
    from farhorizons.species import SpeciesData

_UNKNOWN = "unknown"

# A roll on a ten-sided die picks the type; main sequence is the most common.
_TYPE_BY_ROLL = {
    1: StarType.DWARF,
    2: StarType.DEGENERATE,
    3: StarType.GIANT,
}

# Big stars roll bigger dice for their planets.
_DIE_BY_COLOR = {
    StarColor.BLUE: 8,
    StarColor.BLUE_WHITE: 7,
    StarColor.WHITE: 6,
    StarColor.YELLOW_WHITE: 5,
    StarColor.YELLOW: 4,
    StarColor.ORANGE: 3,
    StarColor.RED: 2,
}

_DICE_BY_TYPE = {
    StarType.DWARF: 1,
    StarType.DEGENERATE: 2,
    StarType.MAIN_SEQUENCE: 2,
    StarType.GIANT: 3,
}

_SCAN_HEADER = (
    "               Temp  Press Mining\n"
    "  #  Dia  Grav Class Class  Diff  LSN  Atmosphere\n"
    " ---------------------------------------------------------------------\n"
)


def xyz_to_id(x: int, y: int, z: int) -> str:
    """Return the identifier of the star system at the given coordinates."""
    return f"{x:03d}/{y:03d}/{z:03d}"


def _hundredths(value: int) -> str:
    """Format a value stored times 100 as ``whole.fraction``, truncating toward zero."""
    whole = abs(value) // 100 * (1 if value >= 0 else -1)
    fraction = value - whole * 100
    return f"{whole}.{fraction:02d}"


@dataclass
class StarData:
    """A star system and the planets orbiting it."""

    id: str = ""
    system_number: int = 0
    x: int = 0
    y: int = 0
    z: int = 0
    type: StarType | None = None
    color: StarColor | None = None
    size: int = 0
    num_planets: int = 0
    home_system: bool = False
    worm_here: bool = False
    worm_x: int = 0
    worm_y: int = 0
    worm_z: int = 0
    message: int = 0
    visited_by: dict[str, bool] = field(default_factory=dict)
    planet_index: int = 0
    planets: list[PlanetData] = field(default_factory=list)

    def at(self, x: int, y: int, z: int) -> bool:
        """Return True if the system lies at the given coordinates."""
        return (self.x, self.y, self.z) == (x, y, z)

    def convert_to_home_system(self, src: list[PlanetData]) -> None:
        """Replace the planets with copies of ``src`` and perturb them slightly."""
        self.home_system = True
        for i, planet in enumerate(src):
            self.planets[i] = planet.clone()

        for planet in self.planets:
            if planet.temperature_class != 0:
                if planet.temperature_class > 12:
                    planet.temperature_class -= rng.roll(3) - 1
                else:
                    planet.temperature_class += rng.roll(3) - 1
            if planet.pressure_class != 0:
                if planet.pressure_class > 12:
                    planet.pressure_class -= rng.roll(3) - 1
                else:
                    planet.pressure_class += rng.roll(3) - 1
            if len(planet.gases) > 2:
                shift = rng.roll(25) + 10
                first, second = planet.gases[1], planet.gases[2]
                if second.percentage > 50:
                    first.percentage += shift
                    second.percentage -= shift
                elif first.percentage > 50:
                    first.percentage -= shift
                    second.percentage += shift
            if planet.diameter > 12:
                planet.diameter -= rng.roll(3) - 1
            else:
                planet.diameter += rng.roll(3) - 1
            if planet.gravity > 100:
                planet.gravity -= rng.roll(10)
            else:
                planet.gravity += rng.roll(10)
            if planet.mining_difficulty > 100:
                planet.mining_difficulty -= rng.roll(10)
            else:
                planet.mining_difficulty += rng.roll(10)

    def distance_squared_to(self, other: StarData) -> int:
        """Return the squared distance in parsecs to ``other``."""
        dx, dy, dz = self.x - other.x, self.y - other.y, self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def home_planet_index(self) -> int:
        """Return the zero-based index of the home planet, or -1 if none."""
        return next(
            (
                i
                for i, planet in enumerate(self.planets)
                if planet.special == PlanetSpecialType.IDEAL_HOME_PLANET
            ),
            -1,
        )

    def home_planet_number(self) -> int:
        """Return the one-based number of the home planet, or 0 if none."""
        return self.home_planet_index() + 1

    def scan(self, out: TextIO, species: SpeciesData | None = None) -> None:
        """Write a scan report of the system to ``out``.

        Life support needed is reported as 99 when no species is given.
        """
        type_char = self.type.char() if self.type is not None else " "
        color_char = self.color.char() if self.color is not None else " "
        out.write(f"Coordinates:\tx = {self.x}\ty = {self.y}\tz = {self.z}")
        out.write(f"\tstellar type = {type_char}{color_char}{self.size}")
        out.write(f"   {self.num_planets} planets.\n\n")

        if self.worm_here:
            out.write("This star system is the terminus of a natural wormhole.\n\n")

        out.write(_SCAN_HEADER)

        if self.num_planets == 0:
            out.write("\n\tThis star is a nova remnant. Any planets it may have once\n")
            out.write("\thad have been blown away.\n\n")
            return

        for number, planet in enumerate(self.planets, start=1):
            ls_needed = species.life_support_needed(planet) if species is not None else 99
            out.write(
                f"  {number}  {planet.diameter:3d}  {_hundredths(planet.gravity)}"
                f"  {planet.temperature_class:2d}    {planet.pressure_class:2d}"
                f"    {_hundredths(planet.mining_difficulty)} {ls_needed:4d}  "
            )
            if planet.gases:
                out.write(
                    ",".join(f"{gas.type.char()}({gas.percentage}%)" for gas in planet.gases)
                )
            else:
                out.write("No atmosphere")
            out.write("\n")

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "system_number": self.system_number,
            "X": self.x,
            "Y": self.y,
            "Z": self.z,
            "Type": self.type.label() if self.type is not None else _UNKNOWN,
            "Color": self.color.label() if self.color is not None else _UNKNOWN,
            "Size": self.size,
            "NumPlanets": self.num_planets,
            "HomeSystem": self.home_system,
            "WormHere": self.worm_here,
            "WormX": self.worm_x,
            "WormY": self.worm_y,
            "WormZ": self.worm_z,
            "Message": self.message,
            "visited_by": dict(self.visited_by),
            "PlanetIndex": self.planet_index,
            "Planets": [p.to_dict() for p in self.planets] if self.planets else None,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> StarData:
        star_type = data.get("Type")
        color = data.get("Color")
        return cls(
            id=data.get("id", ""),
            system_number=int(data.get("system_number", 0) or 0),
            x=int(data.get("X", 0) or 0),
            y=int(data.get("Y", 0) or 0),
            z=int(data.get("Z", 0) or 0),
            type=(
                None
                if star_type is None or star_type == _UNKNOWN
                else StarType.from_label(star_type)
            ),
            color=(
                None if color is None or color == _UNKNOWN else StarColor.from_label(color)
            ),
            size=int(data.get("Size", 0) or 0),
            num_planets=int(data.get("NumPlanets", 0) or 0),
            home_system=bool(data.get("HomeSystem", False)),
            worm_here=bool(data.get("WormHere", False)),
            worm_x=int(data.get("WormX", 0) or 0),
            worm_y=int(data.get("WormY", 0) or 0),
            worm_z=int(data.get("WormZ", 0) or 0),
            message=int(data.get("Message", 0) or 0),
            visited_by={k: bool(v) for k, v in (data.get("visited_by") or {}).items()},
            planet_index=int(data.get("PlanetIndex", 0) or 0),
            planets=[PlanetData.from_dict(p) for p in data.get("Planets") or []],
        )


def generate_star(x: int, y: int, z: int, n_species: int) -> StarData:
    """Roll a star and its planets at the given coordinates."""
    print(f"Generating star ({x:3d}, {y:3d}, {z:3d})")

    star = StarData(
        id=xyz_to_id(x, y, z),
        x=x,
        y=y,
        z=z,
        num_planets=-2,
        planet_index=-1,
    )
    star.type = _TYPE_BY_ROLL.get(rng.roll(StarType.GIANT + 6), StarType.MAIN_SEQUENCE)
    star.size = rng.roll(10) - 1
    star.color = StarColor(rng.roll(StarColor.RED))

    die = _DIE_BY_COLOR[star.color]
    for _ in range(_DICE_BY_TYPE[star.type]):
        star.num_planets += rng.roll(die)
    while star.num_planets < 1:
        star.num_planets += rng.roll(2)
    while star.num_planets > 9:
        star.num_planets -= rng.roll(3)

    print(
        f"Generating star ({x:3d}, {y:3d}, {z:3d}) "
        f"(type {star.type.label():<13}) (planets {star.num_planets})"
    )

    star.planets = generate_planet(star.id, star.num_planets)
    return star