# farhorizons

Building blocks for Far Horizons, a turn-based strategy game of galactic
exploration and conquest: deterministic dice, the game's constants and
lookup tables, and the data types and generators for star systems, planets
and species.

## Installation

```
pip install .
```

No dependencies beyond the Python standard library (Python 3.10 or later).

## Modules

- `farhorizons.rng` — the deterministic generator. `roll(n)` returns a
  number from 1 to `n` inclusive, `seed(value)` makes runs repeatable,
  `seed_from_time()` seeds from the clock, and `default_rng()` returns the
  shared generator. Independent generators are `Rng` instances with the
  same `roll` and `seed` methods.
- `farhorizons.constants` — limits such as `MIN_STARS`, `MAX_RADIUS` and
  `MAX_SPECIES`, tech ids (`MI` … `BI`, `TECH_ABBR`, `TECH_NAME`), item
  tables (`ITEM_ABBR`, `ITEM_NAME`, `ITEM_COST`, `ITEM_CARRY_CAPACITY`,
  `ITEM_CRITICAL_TECH`, `ITEM_TECH_REQUIREMENT`), ship classes and their
  tonnage and cost, planet status flags, transaction codes and order
  commands (`COMMAND_NAME`, `COMMAND_ABBR`).
- `farhorizons.enums` — `StarColor`, `StarType`, `GasType` and
  `PlanetSpecialType`. Each has `label()` (the name used in saved data) and
  `from_label()`, which raises `ValueError` for an unknown name; all but
  `PlanetSpecialType` also have `char()` for reports.
- `farhorizons.planet` — `GasData`, `PlanetData` (with its
  `generate_*` rolls and `clone()`), `NamedPlanetData`, and `lsn()`, an
  approximate life support needed between two planets.
- `farhorizons.planetgen` — `generate_planet(star_id, num_planets)` rolls
  ordinary planets; `generate_earth_like_planet(star_id, num_planets)`
  tries for a system with an ideal home planet and returns `None` when the
  roll does not produce one or the system fails the home-system test.
- `farhorizons.species` — `SpeciesData` and its
  `life_support_needed(colony)`, which raises `ValueError` if the species
  has no home planet set.
- `farhorizons.star` — `StarData`, `xyz_to_id()` and
  `generate_star(x, y, z, n_species)`. A star can write a scan report,
  give its home planet's index or number, measure squared distance to
  another star, and be turned into a home system from template planets.

## Example

```python
import json
import sys

from farhorizons.rng import seed
from farhorizons.star import StarData, generate_star

seed(12345)                          # same seed, same star
star = generate_star(10, 12, 7, 15)  # prints progress lines to stdout
star.scan(sys.stdout)                # LSN column shows 99 without a species

text = json.dumps(star.to_dict(), indent=2)
again = StarData.from_dict(json.loads(text))
```

Every data class has `to_dict()` and `from_dict()`; the dictionaries hold
only plain JSON values, with enumerations stored by their labels. A
species' home planet is kept in memory only and is not saved.

## What this package does not do

It works at the level of single star systems, planets and species. It does
not read or check a game setup file, does not lay out a whole galaxy of
stars and wormholes, does not save or load a galaxy file, and has no
galaxy-wide listing and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```