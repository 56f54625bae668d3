"""LED sectional: live flight categories on an addressable LED strip."""

__version__ = "0.1.0"
