"""Planets, their atmospheres and the rolls that generate them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from farhorizons import rng
from farhorizons.constants import MAX_ITEMS
from farhorizons.enums import GasType, PlanetSpecialType


@dataclass
class GasData:
    """One gas in an atmosphere and its share in percent."""

    type: GasType
    percentage: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"Type": self.type.label(), "Percentage": self.percentage}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GasData:
        return cls(
            type=GasType.from_label(data["Type"]),
            percentage=int(data.get("Percentage", 0)),
        )


# Starting index into the gas list, by temperature class // 2.25.
_FIRST_GAS = (
    GasType.H2,
    GasType.H2,
    GasType.CH4,
    GasType.HE,
    GasType.NH3,
    GasType.N2,
    GasType.CO2,
    GasType.O2,
    GasType.HCL,
)

_PLANET_FIELDS = (
    ("temperature_class", "TemperatureClass"),
    ("pressure_class", "PressureClass"),
    ("diameter", "Diameter"),
    ("density", "Density"),
    ("gravity", "Gravity"),
    ("mining_difficulty", "MiningDifficulty"),
    ("econ_efficiency", "EconEfficiency"),
    ("md_increase", "MDIncrease"),
    ("message", "Message"),
)


@dataclass
class PlanetData:
    """Physical description of a planet.

    Gravity and mining difficulty are stored times 100, diameter in
    thousands of kilometres.
    """

    id: str = ""
    temperature_class: int = 0
    pressure_class: int = 0
    special: PlanetSpecialType = PlanetSpecialType.NOT_SPECIAL
    gases: list[GasData] = field(default_factory=list)
    diameter: int = 0
    density: int = 0
    gravity: int = 0
    mining_difficulty: int = 0
    econ_efficiency: int = 0
    md_increase: int = 0
    message: int = 0

    def clone(self) -> PlanetData:
        """Return a deep copy without the identifier."""
        return PlanetData(
            temperature_class=self.temperature_class,
            pressure_class=self.pressure_class,
            special=self.special,
            gases=[GasData(g.type, g.percentage) for g in self.gases],
            diameter=self.diameter,
            density=self.density,
            gravity=self.gravity,
            mining_difficulty=self.mining_difficulty,
            econ_efficiency=self.econ_efficiency,
            md_increase=self.md_increase,
            message=self.message,
        )

    def generate_density(self, gas_giant: bool) -> int:
        """Roll a density times 100: 60-170 for gas giants, 370-570 otherwise."""
        base, sigma = (58, 56) if gas_giant else (368, 101)
        return base + rng.roll(sigma) + rng.roll(sigma)

    def generate_diameter(self, base_diameter: int) -> int:
        """Randomize ``base_diameter``; the result is at least 3."""
        diameter = base_diameter
        die_size = max(base_diameter // 4, 2)
        for _ in range(4):
            if rng.roll(100) > 50:
                diameter += rng.roll(die_size)
            else:
                diameter -= rng.roll(die_size)
        while diameter < 3:
            diameter += rng.roll(4)
        return diameter

    def generate_gases(self, pressure_class: int, temperature_class: int) -> list[GasData]:
        """Roll an atmosphere whose percentages sum to 100; empty if no pressure."""
        if pressure_class == 0:
            return []

        index = 100 * temperature_class // 225
        first_gas = _FIRST_GAS[index] if index < len(_FIRST_GAS) else GasType.CL2

        gases: list[GasData] = []
        wanted = (rng.roll(4) + rng.roll(4)) // 2
        while not gases:
            for value in range(first_gas, first_gas + 5):
                if len(gases) >= wanted:
                    break
                gas_type = GasType(value)
                if gas_type is GasType.HE and temperature_class > 5:
                    continue  # too hot for helium
                chance = rng.roll(3)
                if chance == 2 and gas_type is GasType.HE:
                    continue  # keep helium planets rare
                if chance == 3:
                    continue
                if gas_type is GasType.HE:
                    amount = rng.roll(20)
                elif gas_type is GasType.O2:
                    amount = rng.roll(50)
                else:
                    amount = rng.roll(100)
                gases.append(GasData(gas_type, amount))

        total_quantity = sum(g.percentage for g in gases)
        total_percent = 0
        for gas in gases:
            gas.percentage = 100 * gas.percentage // total_quantity
            total_percent += gas.percentage
        gases[0].percentage += 100 - total_percent
        return gases

    def generate_mining_difficulty(self, diameter: int, earth_like: bool) -> int:
        """Roll a mining difficulty times 100, scaled by ``diameter``."""

        def attempt(spread: int) -> int:
            multiplier = rng.roll(3) + rng.roll(3) + rng.roll(3) - rng.roll(4)
            return multiplier * rng.roll(diameter) + rng.roll(spread) + rng.roll(spread)

        mining_dif = 0
        while mining_dif < 40 or mining_dif > 500:
            mining_dif = attempt(30)

        if earth_like:
            while mining_dif < 30 or mining_dif > 1000:
                mining_dif = attempt(20)
        else:
            while mining_dif < 40 or mining_dif > 500:
                mining_dif = attempt(30)
            mining_dif = mining_dif * 11 // 5
        return mining_dif

    def generate_pressure_class(self, gravity: int, temperature_class: int, gas_giant: bool) -> int:
        """Roll a pressure class from gravity; 0 means no atmosphere."""
        if gravity < 10:
            return 0
        if temperature_class < 2 or temperature_class > 27:
            return 0

        pressure_class = gravity // 10
        die_size = max(pressure_class // 4, 2)
        n_rolls = rng.roll(3) + rng.roll(3) + rng.roll(3)
        for _ in range(n_rolls):
            if rng.roll(100) > 50:
                pressure_class += rng.roll(die_size)
            else:
                pressure_class -= rng.roll(die_size)

        low, high = (11, 29) if gas_giant else (0, 12)
        while pressure_class < low:
            pressure_class += rng.roll(3)
        while pressure_class > high:
            pressure_class -= rng.roll(3)
        return pressure_class

    def generate_temperature_class(
        self,
        num_planets: int,
        orbit: int,
        gas_giant: bool,
        base_temperature_class: int,
    ) -> int:
        """Randomize ``base_temperature_class`` for the given orbit."""
        temperature_class = base_temperature_class
        die_size = max(base_temperature_class // 4, 2)
        n_rolls = rng.roll(3) + rng.roll(3) + rng.roll(3)
        for _ in range(n_rolls):
            if rng.roll(100) > 50:
                temperature_class += rng.roll(die_size)
            else:
                temperature_class -= rng.roll(die_size)

        if gas_giant:
            while temperature_class < 3:
                temperature_class += rng.roll(2)
            while temperature_class > 7:
                temperature_class -= rng.roll(2)
        else:
            while temperature_class < 1:
                temperature_class += rng.roll(3)
            while temperature_class > 30:
                temperature_class -= rng.roll(3)

        # Inner planets of small systems are sometimes too cold; warm them up.
        if num_planets < 4 and orbit < 3:
            while temperature_class < 12:
                temperature_class += rng.roll(4)
        return temperature_class

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        data.update({key: getattr(self, attr) for attr, key in _PLANET_FIELDS})
        data["Special"] = self.special.label()
        data["Gases"] = [g.to_dict() for g in self.gases] if self.gases else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PlanetData:
        values = {attr: int(data.get(key, 0) or 0) for attr, key in _PLANET_FIELDS}
        special = data.get("Special")
        return cls(
            id=data.get("id", ""),
            special=(
                PlanetSpecialType.from_label(special)
                if special is not None
                else PlanetSpecialType.NOT_SPECIAL
            ),
            gases=[GasData.from_dict(g) for g in data.get("Gases") or []],
            **values,
        )


_NAMED_PLANET_FIELDS = (
    ("name", "Name"),
    ("x", "X"),
    ("y", "Y"),
    ("z", "Z"),
    ("pn", "PN"),
    ("status", "Status"),
    ("hiding", "Hiding"),
    ("hidden", "Hidden"),
    ("planet_index", "PlanetIndex"),
    ("siege_eff", "SiegeEff"),
    ("shipyards", "Shipyards"),
    ("ius_needed", "IUsNeeded"),
    ("aus_needed", "AUsNeeded"),
    ("auto_ius", "AutoIUs"),
    ("auto_aus", "AutoAUs"),
    ("ius_to_install", "IUsToInstall"),
    ("aus_to_install", "AUsToInstall"),
    ("mi_base", "MIBase"),
    ("ma_base", "MABase"),
    ("pop_units", "PopUnits"),
    ("use_on_ambush", "UseOnAmbush"),
    ("message", "Message"),
    ("special", "Special"),
)


@dataclass
class NamedPlanetData:
    """A planet a species has named: its home or one of its colonies."""

    id: str = ""
    name: str = ""
    x: int = 0
    y: int = 0
    z: int = 0
    pn: int = 0
    status: int = 0
    hiding: bool = False
    hidden: bool = False
    planet_index: int = 0
    siege_eff: int = 0
    shipyards: int = 0
    ius_needed: int = 0
    aus_needed: int = 0
    auto_ius: int = 0
    auto_aus: int = 0
    ius_to_install: int = 0
    aus_to_install: int = 0
    mi_base: int = 0
    ma_base: int = 0
    pop_units: int = 0
    use_on_ambush: int = 0
    message: int = 0
    special: int = 0
    item_quantity: list[int] = field(default_factory=lambda: [0] * MAX_ITEMS)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        data.update({key: getattr(self, attr) for attr, key in _NAMED_PLANET_FIELDS})
        data["ItemQuantity"] = list(self.item_quantity)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> NamedPlanetData:
        planet = cls(id=data.get("id", ""))
        for attr, key in _NAMED_PLANET_FIELDS:
            if key in data:
                setattr(planet, attr, data[key])
        quantities = list(data.get("ItemQuantity") or [])
        if len(quantities) > MAX_ITEMS:
            raise ValueError(f"too many item quantities: {len(quantities)} > {MAX_ITEMS}")
        planet.item_quantity = quantities + [0] * (MAX_ITEMS - len(quantities))
        return planet


def lsn(current_planet: PlanetData, home_planet: PlanetData) -> int:
    """Approximate life support needed on ``current_planet``.

    Oxygen is assumed to be required and any gas absent from the home
    planet is treated as poisonous.
    """
    needed = 0
    cur_t, home_t = current_planet.temperature_class, home_planet.temperature_class
    if cur_t < home_t:
        needed += 2 * home_t - cur_t
    elif cur_t > home_t:
        needed += 2 * cur_t - home_t

    cur_p, home_p = current_planet.pressure_class, home_planet.pressure_class
    if cur_p < home_p:
        needed += 2 * home_p - cur_p
    elif cur_p > home_p:
        needed += 2 * cur_p - home_p

    if not any(g.type is GasType.O2 for g in current_planet.gases):
        needed += 2

    home_types = {g.type for g in home_planet.gases}
    needed += 2 * sum(1 for g in current_planet.gases if g.type not in home_types)
    return needed