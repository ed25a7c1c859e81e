"""Game-wide constants and lookup tables."""

# Defaults for a standard game: 15 species, 90 systems, 20 parsecs across the radius.
STANDARD_NUMBER_OF_SPECIES = 15
STANDARD_NUMBER_OF_STAR_SYSTEMS = 90
STANDARD_GALACTIC_RADIUS = 20

MIN_SPECIES, MAX_SPECIES = 1, 100
MIN_STARS, MAX_STARS = 12, 1000
MIN_RADIUS, MAX_RADIUS = 6, 50
MAX_DIAMETER = MAX_RADIUS * 2
MAX_PLANETS = MAX_STARS * 9

HP_AVAILABLE_POP = 1500
NUM_EXTRA_NAMPLAS = 50
NUM_EXTRA_SHIPS = 100
MAX_LOCATIONS = 10_000

# One 32-bit word holds the contact flags of 32 species.
NUM_CONTACT_WORDS = (MAX_SPECIES + 31) // 32

# Technology ids, in report order.
TECH_ABBR = ("MI", "MA", "ML", "GV", "LS", "BI")
TECH_NAME = ("Mining", "Manufacturing", "Military", "Gravitics", "Life Support", "Biology")
MI, MA, ML, GV, LS, BI = range(len(TECH_ABBR))

# Item ids.
(
    RM, PD, SU, DR, CU, IU, AU, FS, JP, FM, FJ, GT, FD, TP, GW,
    SG1, SG2, SG3, SG4, SG5, SG6, SG7, SG8, SG9,
    GU1, GU2, GU3, GU4, GU5, GU6, GU7, GU8, GU9,
    X1, X2, X3, X4, X5,
) = range(38)

MAX_ITEMS = X5 + 1

# Each row: abbreviation, name, cost, carry capacity, critical tech, tech level required.
_BASIC_ITEMS = [
    ("RM", "Raw Material Unit", 1, 1, MI, 1),
    ("PD", "Planetary Defense Unit", 1, 3, ML, 1),
    ("SU", "Starbase Unit", 110, 20, MA, 20),
    ("DR", "Damage Repair Unit", 50, 1, MA, 30),
    ("CU", "Colonist Unit", 1, 1, LS, 1),
    ("IU", "Colonial Mining Unit", 1, 1, MI, 1),
    ("AU", "Colonial Manufacturing Unit", 1, 1, MA, 1),
    ("FS", "Fail-Safe Jump Unit", 25, 1, GV, 20),
    ("JP", "Jump Portal Unit", 100, 10, GV, 25),
    ("FM", "Forced Misjump Unit", 100, 5, GV, 30),
    ("FJ", "Forced Jump Unit", 125, 5, GV, 40),
    ("GT", "Gravitic Telescope Unit", 500, 20, GV, 50),
    ("FD", "Field Distortion Unit", 50, 1, LS, 20),
    ("TP", "Terraforming Plant", 50000, 100, BI, 40),
    ("GW", "Germ Warfare Bomb", 1000, 100, BI, 50),
]
_SHIELDS = [
    (f"SG{mark}", f"Mark-{mark} Shield Generator", 250 * mark, 5 * mark, LS, 10 * mark)
    for mark in range(1, 10)
]
_GUNS = [
    (f"GU{mark}", f"Mark-{mark} Gun Unit", 250 * mark, 5 * mark, ML, 10 * mark)
    for mark in range(1, 10)
]
_SPARES = [(f"X{n}", f"X{n} Unit", 9999, 9999, 99, 999) for n in range(1, 6)]
_ITEM_TABLE = _BASIC_ITEMS + _SHIELDS + _GUNS + _SPARES

(
    ITEM_ABBR,
    ITEM_NAME,
    ITEM_COST,
    ITEM_CARRY_CAPACITY,
    ITEM_CRITICAL_TECH,
    ITEM_TECH_REQUIREMENT,
) = (tuple(column) for column in zip(*_ITEM_TABLE))

# Status flags for named planets; combined with bitwise or.
HOME_PLANET = 1 << 0
COLONY = 1 << 1
POPULATED = 1 << 3
MINING_COLONY = 1 << 4
RESORT_COLONY = 1 << 5
DISBANDED_COLONY = 1 << 6

# Ship classes.
PB, CT, ES, DD, FG, CL, CS, CA, CC, BC, BS, DN, SD, BM, BW, BR, BA, TR = range(18)
NUM_SHIP_CLASSES = TR + 1

SHIP_ABBR = tuple(
    "PB CT ES FF DD CL CS CA CC BC BS DN SD BM BW BR BA TR".split()
)
SHIP_TONNAGE = (1, 2) + tuple(5 * step for step in range(1, 15)) + (1, 1)
SHIP_COST = tuple(100 * tons for tons in SHIP_TONNAGE)

# Ship types.
FTL, SUB_LIGHT, STARBASE = range(3)
SHIP_TYPE = ("", "S", "S")

# Ship status codes.
UNDER_CONSTRUCTION, ON_SURFACE, IN_ORBIT, IN_DEEP_SPACE, JUMPED_IN_COMBAT, FORCED_JUMP = range(6)

# Interspecies transactions.
MAX_TRANSACTIONS = 1000
(
    EU_TRANSFER,
    MESSAGE_TO_SPECIES,
    BESIEGE_PLANET,
    SIEGE_EU_TRANSFER,
    TECH_TRANSFER,
    DETECTION_DURING_SIEGE,
    SHIP_MISHAP,
    ASSIMILATION,
    INTERSPECIES_CONSTRUCTION,
    TELESCOPE_DETECTION,
    ALIEN_JUMP_PORTAL_USAGE,
    KNOWLEDGE_TRANSFER,
    LANDING_REQUEST,
    LOOTING_EU_TRANSFER,
    ALLIES_ORDER,
) = range(1, 16)

# Order commands, in code order.
COMMAND_NAME = tuple(
    """Undefined Ally Ambush Attack Auto Base Battle Build Continue Deep Destroy
    Develop Disband End Enemy Engage Estimate Haven Hide Hijack Ibuild Icontinue
    Install Intercept Jump Land Message Move Name Neutral Orbit Pjump Production
    Recycle Repair Research Scan Send Shipyard Start Summary Surrender Target Teach
    Tech Telescope Terraform Transfer Unload Upgrade Visited Withdraw Wormhole ZZZ""".split()
)
COMMAND_ABBR = ("   ",) + tuple(name[:3].upper() for name in COMMAND_NAME[1:])

(
    UNDEFINED, ALLY, AMBUSH, ATTACK, AUTO, BASE, BATTLE, BUILD, CONTINUE, DEEP,
    DESTROY, DEVELOP, DISBAND, END, ENEMY, ENGAGE, ESTIMATE, HAVEN, HIDE, HIJACK,
    IBUILD, ICONTINUE, INSTALL, INTERCEPT, JUMP, LAND, MESSAGE, MOVE, NAME, NEUTRAL,
    ORBIT, PJUMP, PRODUCTION, RECYCLE, REPAIR, RESEARCH, SCAN, SEND, SHIPYARD, START,
    SUMMARY, SURRENDER, TARGET, TEACH, TECH, TELESCOPE, TERRAFORM, TRANSFER, UNLOAD,
    UPGRADE, VISITED, WITHDRAW, WORMHOLE, ZZZ,
) = range(len(COMMAND_NAME))

NUM_COMMANDS = len(COMMAND_NAME)

# Token kinds used when parsing orders.
UNKNOWN, TECH_ID, ITEM_CLASS, SHIP_CLASS, PLANET_ID, SPECIES_ID = range(6)

# Display characters indexed by star type, star color, star size and gas.
TYPE_CHAR = tuple(" dD g")
COLOR_CHAR = tuple(" OBAFGKM")
SIZE_CHAR = tuple("0123456789")
GAS_STRING = ("   ",) + tuple("H2 CH4 He NH3 N2 CO2 O2 HCl Cl2 F2 H2O SO2 H2S".split())