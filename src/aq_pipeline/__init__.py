"""Source adapters normalizing Chinese air-quality portals into canonical measurements."""

__version__ = "0.1.0"
