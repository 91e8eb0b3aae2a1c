"""
Core Module

Satellite state machine and the operations applied to it.

Public API:
- Satellite: Orientation, panel status and data counter
- apply_operation: Applies one Rotate/ActivatePanels/DeactivatePanels/CollectData
- Exceptions: SatelliteConsoleError, ConfigurationError, InputStreamClosed
"""

from satellite_console.core.exceptions import (
    ConfigurationError,
    InputStreamClosed,
    SatelliteConsoleError,
)
from satellite_console.core.operations import (
    ActivatePanels,
    CollectData,
    DeactivatePanels,
    Operation,
    OperationOutcome,
    Rotate,
    apply_operation,
)
from satellite_console.core.satellite import (
    Orientation,
    PanelStatus,
    RotateOutcome,
    RotationRejection,
    Satellite,
    SatelliteStatus,
)

__all__ = [
    "Satellite",
    "SatelliteStatus",
    "Orientation",
    "PanelStatus",
    "RotateOutcome",
    "RotationRejection",
    "Rotate",
    "ActivatePanels",
    "DeactivatePanels",
    "CollectData",
    "Operation",
    "OperationOutcome",
    "apply_operation",
    "SatelliteConsoleError",
    "ConfigurationError",
    "InputStreamClosed",
]
