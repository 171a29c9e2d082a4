"""drug-info: FDA drug label normalization and seeding."""

__version__ = "0.1.0"
