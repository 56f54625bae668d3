"""Application orchestration layer.

- `update()` maps a configuration and a report set onto a display buffer
  (pure, one call per fetch cycle)
- `SectionalOrchestrator` runs the fetch, display and lightning loop
"""

from .mapping import MappingResult, update
from .orchestrator import SectionalOrchestrator

__all__ = ["MappingResult", "SectionalOrchestrator", "update"]
