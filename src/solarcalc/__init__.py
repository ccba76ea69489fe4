"""solarcalc public API.

Keep this surface small: users should mostly interact with the engine and the
functions re-exported here.
"""

from .api import (
    snapshot,
    snapshot_at,
    explain,
    sun_position,
    sun_events,
)
from .core.engine import SolarPositionEngine, compute_snapshot
from .core.errors import DomainError, SolarCalcError
from .core.types import LocationConfig, SolarSnapshot

__all__ = [
    "snapshot",
    "snapshot_at",
    "explain",
    "sun_position",
    "sun_events",
    "SolarPositionEngine",
    "compute_snapshot",
    "DomainError",
    "SolarCalcError",
    "LocationConfig",
    "SolarSnapshot",
]
