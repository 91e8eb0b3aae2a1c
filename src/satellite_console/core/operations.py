"""
Satellite Operations

The closed set of operations a session can apply to a satellite, and the
single function that applies them. Operation values are built per user
action and discarded after one application.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from satellite_console.core.satellite import RotationRejection, Satellite, SatelliteStatus

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Rotate:
    direction: str


@dataclass(frozen=True)
class ActivatePanels:
    pass


@dataclass(frozen=True)
class DeactivatePanels:
    pass


@dataclass(frozen=True)
class CollectData:
    pass


Operation = Union[Rotate, ActivatePanels, DeactivatePanels, CollectData]


@dataclass(frozen=True)
class OperationOutcome:
    """What happened when an operation was applied."""

    operation: Operation
    accepted: bool
    status: SatelliteStatus
    rejection: Optional[RotationRejection] = None


def apply_operation(satellite: Satellite, operation: Operation) -> OperationOutcome:
    """
    Apply one operation to the satellite.

    Args:
        satellite: Target satellite
        operation: One of Rotate, ActivatePanels, DeactivatePanels, CollectData

    Returns:
        OperationOutcome with the resulting status snapshot

    Raises:
        TypeError: If operation is not one of the known variants
    """
    if isinstance(operation, Rotate):
        result = satellite.rotate(operation.direction)
        return OperationOutcome(
            operation, result.accepted, satellite.snapshot(), result.rejection
        )
    if isinstance(operation, ActivatePanels):
        satellite.activate_panels()
    elif isinstance(operation, DeactivatePanels):
        satellite.deactivate_panels()
    elif isinstance(operation, CollectData):
        satellite.collect_data()
    else:
        raise TypeError(f"Unknown satellite operation: {operation!r}")

    logger.debug(f"Applied {type(operation).__name__}")
    return OperationOutcome(operation, True, satellite.snapshot())
