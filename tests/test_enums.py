import pytest

from farhorizons.enums import GasType, PlanetSpecialType, StarColor, StarType


@pytest.mark.parametrize(
    "color, char, label",
    [
        (StarColor.BLUE, "O", "blue"),
        (StarColor.BLUE_WHITE, "B", "blue-white"),
        (StarColor.WHITE, "A", "white"),
        (StarColor.YELLOW_WHITE, "F", "yellow-white"),
        (StarColor.YELLOW, "G", "yellow"),
        (StarColor.ORANGE, "K", "orange"),
        (StarColor.RED, "M", "red"),
    ],
)
def test_star_color_chars_and_labels(color, char, label):
    assert color.char() == char
    assert color.label() == label


@pytest.mark.parametrize(
    "gas, char, label",
    [
        (GasType.H2, "H2", "Hydrogen"),
        (GasType.HE, "He", "Helium"),
        (GasType.HCL, "HCl", "Hydrogen Chloride"),
        (GasType.CL2, "Cl2", "Chlorine"),
        (GasType.H2O, "H2O", "Steam"),
        (GasType.H2S, "H2S", "Hydrogen Sulfide"),
    ],
)
def test_gas_chars_and_labels(gas, char, label):
    assert gas.char() == char
    assert gas.label() == label


def test_star_type_chars():
    assert [t.char() for t in StarType] == ["d", "D", " ", "g"]
    assert StarType.MAIN_SEQUENCE.label() == "main-sequence"


def test_special_labels():
    assert PlanetSpecialType.IDEAL_HOME_PLANET.label() == "ideal-home-planet"
    assert PlanetSpecialType.RADIOACTIVE_HELLHOLE.label() == "radioactive-hellhole"


@pytest.mark.parametrize("enum_cls", [StarColor, GasType, PlanetSpecialType, StarType])
def test_label_round_trip(enum_cls):
    for member in enum_cls:
        assert enum_cls.from_label(member.label()) is member


@pytest.mark.parametrize("enum_cls", [StarColor, GasType, PlanetSpecialType, StarType])
def test_unknown_label_raises(enum_cls):
    with pytest.raises(ValueError):
        enum_cls.from_label("no-such-thing")


def test_labels_are_case_sensitive():
    with pytest.raises(ValueError):
        GasType.from_label("hydrogen")
    with pytest.raises(ValueError):
        StarColor.from_label("Blue")


@pytest.mark.parametrize(
    "enum_cls, label, number",
    [
        (StarColor, "red", 7),
        (GasType, "Hydrogen Sulfide", 13),
        (StarType, "giant", 4),
        (PlanetSpecialType, "not-special", 0),
    ],
)
def test_labels_decode_to_game_numbering(enum_cls, label, number):
    assert int(enum_cls.from_label(label)) == number