"""Enumerations for stars, planets and atmospheric gases."""

from __future__ import annotations

from enum import IntEnum


class StarColor(IntEnum):
    """Star colour, from the hottest (blue) to the coolest (red)."""

    BLUE = 1
    BLUE_WHITE = 2
    WHITE = 3
    YELLOW_WHITE = 4
    YELLOW = 5
    ORANGE = 6
    RED = 7

    def char(self) -> str:
        """Return the one-letter spectral class."""
        return _STAR_COLOR_CHAR.get(self, " ")

    def label(self) -> str:
        """Return the name used in saved data."""
        return _STAR_COLOR_LABEL.get(self, "unknown")

    @classmethod
    def from_label(cls, label: str) -> StarColor:
        """Return the colour named by ``label``; raise ValueError if unknown."""
        for member, name in _STAR_COLOR_LABEL.items():
            if name == label:
                return member
        raise ValueError(f"invalid StarColor {label!r}")


_STAR_COLOR_CHAR = {
    StarColor.BLUE: "O",
    StarColor.BLUE_WHITE: "B",
    StarColor.WHITE: "A",
    StarColor.YELLOW_WHITE: "F",
    StarColor.YELLOW: "G",
    StarColor.ORANGE: "K",
    StarColor.RED: "M",
}

_STAR_COLOR_LABEL = {
    StarColor.BLUE: "blue",
    StarColor.BLUE_WHITE: "blue-white",
    StarColor.WHITE: "white",
    StarColor.YELLOW_WHITE: "yellow-white",
    StarColor.YELLOW: "yellow",
    StarColor.ORANGE: "orange",
    StarColor.RED: "red",
}


class GasType(IntEnum):
    """Gases that may appear in a planetary atmosphere."""

    H2 = 1
    CH4 = 2
    HE = 3
    NH3 = 4
    N2 = 5
    CO2 = 6
    O2 = 7
    HCL = 8
    CL2 = 9
    F2 = 10
    H2O = 11
    SO2 = 12
    H2S = 13

    def char(self) -> str:
        """Return the chemical formula."""
        return _GAS_CHAR.get(self, "   ")

    def label(self) -> str:
        """Return the common name used in saved data."""
        return _GAS_LABEL.get(self, "unknown")

    @classmethod
    def from_label(cls, label: str) -> GasType:
        """Return the gas named by ``label``; raise ValueError if unknown."""
        for member, name in _GAS_LABEL.items():
            if name == label:
                return member
        raise ValueError(f"invalid GasType {label!r}")


_GAS_CHAR = {
    GasType.H2: "H2",
    GasType.CH4: "CH4",
    GasType.HE: "He",
    GasType.NH3: "NH3",
    GasType.N2: "N2",
    GasType.CO2: "CO2",
    GasType.O2: "O2",
    GasType.HCL: "HCl",
    GasType.CL2: "Cl2",
    GasType.F2: "F2",
    GasType.H2O: "H2O",
    GasType.SO2: "SO2",
    GasType.H2S: "H2S",
}

_GAS_LABEL = {
    GasType.H2: "Hydrogen",
    GasType.CH4: "Methane",
    GasType.HE: "Helium",
    GasType.NH3: "Ammonia",
    GasType.N2: "Nitrogen",
    GasType.CO2: "Carbon Dioxide",
    GasType.O2: "Oxygen",
    GasType.HCL: "Hydrogen Chloride",
    GasType.CL2: "Chlorine",
    GasType.F2: "Fluorine",
    GasType.H2O: "Steam",
    GasType.SO2: "Sulfur Dioxide",
    GasType.H2S: "Hydrogen Sulfide",
}


class PlanetSpecialType(IntEnum):
    """Marks planets that are especially good or bad places to live."""

    NOT_SPECIAL = 0
    IDEAL_HOME_PLANET = 1
    IDEAL_COLONY_PLANET = 2
    RADIOACTIVE_HELLHOLE = 3

    def label(self) -> str:
        """Return the name used in saved data."""
        return _SPECIAL_LABEL.get(self, "unknown")

    @classmethod
    def from_label(cls, label: str) -> PlanetSpecialType:
        """Return the type named by ``label``; raise ValueError if unknown."""
        for member, name in _SPECIAL_LABEL.items():
            if name == label:
                return member
        raise ValueError(f"invalid PlanetSpecialType {label!r}")


_SPECIAL_LABEL = {
    PlanetSpecialType.NOT_SPECIAL: "not-special",
    PlanetSpecialType.IDEAL_HOME_PLANET: "ideal-home-planet",
    PlanetSpecialType.IDEAL_COLONY_PLANET: "ideal-colony-planet",
    PlanetSpecialType.RADIOACTIVE_HELLHOLE: "radioactive-hellhole",
}


class StarType(IntEnum):
    """Dwarf, degenerate, main sequence or giant."""

    DWARF = 1
    DEGENERATE = 2
    MAIN_SEQUENCE = 3
    GIANT = 4

    def char(self) -> str:
        """Return the one-letter prefix used in stellar classifications."""
        return _STAR_TYPE_CHAR.get(self, " ")

    def label(self) -> str:
        """Return the name used in saved data."""
        return _STAR_TYPE_LABEL.get(self, "unknown")

    @classmethod
    def from_label(cls, label: str) -> StarType:
        """Return the type named by ``label``; raise ValueError if unknown."""
        for member, name in _STAR_TYPE_LABEL.items():
            if name == label:
                return member
        raise ValueError(f"invalid StarType {label!r}")


_STAR_TYPE_CHAR = {
    StarType.DWARF: "d",
    StarType.DEGENERATE: "D",
    StarType.MAIN_SEQUENCE: " ",
    StarType.GIANT: "g",
}

_STAR_TYPE_LABEL = {
    StarType.DWARF: "dwarf",
    StarType.DEGENERATE: "degenerate",
    StarType.MAIN_SEQUENCE: "main-sequence",
    StarType.GIANT: "giant",
}