[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "farhorizons"
version = "0.1.0"
description = "Star system, planet and species data with deterministic generation for the Far Horizons strategy game"
requires-python = ">=3.10"
dependencies = []
keywords = ["far-horizons", "strategy", "game", "star-system", "planet", "generator", "play-by-mail"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["farhorizons"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
