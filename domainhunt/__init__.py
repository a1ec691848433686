"""domainhunt - find registrable domain names."""

__version__ = "0.1.0"
