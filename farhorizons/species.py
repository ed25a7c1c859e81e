"""Species data and the life support a species needs on a colony."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from farhorizons.enums import GasType
from farhorizons.planet import NamedPlanetData, PlanetData

_TECH_COUNT = 6

_SCALAR_FIELDS = (
    ("number", "Number"),
    ("name", "Name"),
    ("govt_name", "GovtName"),
    ("govt_type", "GovtType"),
    ("x", "X"),
    ("y", "Y"),
    ("z", "Z"),
    ("pn", "PN"),
    ("required_gas_min", "RequiredGasMin"),
    ("required_gas_max", "RequiredGasMax"),
    ("auto_orders", "AutoOrders"),
    ("num_namplas", "NumNamplas"),
    ("num_ships", "NumShips"),
    ("hp_original_base", "HPOriginalBase"),
    ("econ_units", "EconUnits"),
    ("fleet_cost", "FleetCost"),
    ("fleet_percent_cost", "FleetPercentCost"),
)

_TECH_FIELDS = (
    ("tech_level", "TechLevel"),
    ("init_tech_level", "InitTechLevel"),
    ("tech_knowledge", "TechKnowledge"),
    ("tech_eps", "TechEps"),
)

_FLAG_FIELDS = (
    ("contact", "Contact"),
    ("ally", "Ally"),
    ("enemy", "Enemy"),
)

_GAS_LIST_FIELDS = (
    ("neutral_gas", "NeutralGas"),
    ("poison_gas", "PoisonGas"),
)

_UNKNOWN_GAS = "unknown"


def _tech_list() -> list[int]:
    return [0] * _TECH_COUNT


def _tech_from(values: Any) -> list[int]:
    items = [int(v) for v in values or []]
    if len(items) > _TECH_COUNT:
        raise ValueError(f"too many tech values: {len(items)} > {_TECH_COUNT}")
    return items + [0] * (_TECH_COUNT - len(items))


@dataclass
class SpeciesData:
    """A species: its home, its biology and its standing with others.

    The home planet is kept in memory only and never saved.
    """

    id: str = ""
    number: int = 0
    name: str = ""
    govt_name: str = ""
    govt_type: str = ""
    home_planet: PlanetData | None = None
    home_nampla: NamedPlanetData | None = None
    x: int = 0
    y: int = 0
    z: int = 0
    pn: int = 0
    required_gas: GasType | None = None
    required_gas_min: int = 0
    required_gas_max: int = 0
    neutral_gas: list[GasType] = field(default_factory=list)
    poison_gas: list[GasType] = field(default_factory=list)
    auto_orders: bool = False
    tech_level: list[int] = field(default_factory=_tech_list)
    init_tech_level: list[int] = field(default_factory=_tech_list)
    tech_knowledge: list[int] = field(default_factory=_tech_list)
    num_namplas: int = 0
    num_ships: int = 0
    tech_eps: list[int] = field(default_factory=_tech_list)
    hp_original_base: int = 0
    econ_units: int = 0
    fleet_cost: int = 0
    fleet_percent_cost: int = 0
    contact: list[bool] = field(default_factory=list)
    ally: list[bool] = field(default_factory=list)
    enemy: list[bool] = field(default_factory=list)

    def life_support_needed(self, colony: PlanetData) -> int:
        """Return the life support tech level needed to live on ``colony``."""
        home = self.home_planet
        if home is None:
            raise ValueError(f"species {self.name!r} has no home planet")

        needed = 3 * abs(colony.temperature_class - home.temperature_class)
        needed += 3 * abs(colony.pressure_class - home.pressure_class)

        required_found = False
        poisons = set(self.poison_gas)
        for gas in colony.gases:
            if gas.percentage == 0:
                continue
            if gas.type == self.required_gas:
                required_found = (
                    self.required_gas_min <= gas.percentage <= self.required_gas_max
                )
            elif gas.type in poisons:
                needed += 3
        if not required_found:
            needed += 3
        return needed

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id}
        data.update({key: getattr(self, attr) for attr, key in _SCALAR_FIELDS})
        data["HomeNampla"] = self.home_nampla.to_dict() if self.home_nampla else None
        data["RequiredGas"] = (
            self.required_gas.label() if self.required_gas is not None else _UNKNOWN_GAS
        )
        for attr, key in _GAS_LIST_FIELDS:
            gases = getattr(self, attr)
            data[key] = [g.label() for g in gases] if gases else None
        for attr, key in _TECH_FIELDS:
            data[key] = list(getattr(self, attr))
        for attr, key in _FLAG_FIELDS:
            flags = getattr(self, attr)
            data[key] = list(flags) if flags else None
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SpeciesData:
        species = cls(id=data.get("id", ""))
        for attr, key in _SCALAR_FIELDS:
            if key in data:
                setattr(species, attr, data[key])
        nampla = data.get("HomeNampla")
        species.home_nampla = NamedPlanetData.from_dict(nampla) if nampla else None
        required = data.get("RequiredGas")
        species.required_gas = (
            None
            if required is None or required == _UNKNOWN_GAS
            else GasType.from_label(required)
        )
        for attr, key in _GAS_LIST_FIELDS:
            setattr(species, attr, [GasType.from_label(g) for g in data.get(key) or []])
        for attr, key in _TECH_FIELDS:
            setattr(species, attr, _tech_from(data.get(key)))
        for attr, key in _FLAG_FIELDS:
            setattr(species, attr, [bool(v) for v in data.get(key) or []])
        return species