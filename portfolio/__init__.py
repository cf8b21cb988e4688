"""Local portfolio gallery: works, tags, search, saved works and favourite artists."""

__version__ = "1.0.0"
