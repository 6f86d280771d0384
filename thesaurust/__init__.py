"""A terminal dictionary and thesaurus with spelling correction and web lookups."""

__version__ = "0.1.2"