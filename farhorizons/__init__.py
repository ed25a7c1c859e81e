"""Star system, planet and species data with deterministic generation for Far Horizons."""

__version__ = "0.1.0"