"""Service layer: network access to the weather source."""

from .metar_client import MetarClient

__all__ = ["MetarClient"]
