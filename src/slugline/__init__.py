"""slugline — human-readable URL slugs that still resolve to an identifier."""

__version__ = "0.1.0"
