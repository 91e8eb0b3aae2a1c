"""
Satellite State Machine

Owns the satellite's orientation, solar panel status and collected data
counter. Every operation is total: invalid input is reported through an
outcome value and never raises.

State tracking:
- Orientation: one of the four cardinal directions (default North)
- Panel status: Active or Inactive (default Inactive)
- Data collected: grows by a fixed increment while panels are active,
  resets to zero when a collection is attempted with panels inactive
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from rich.console import Console

logger = logging.getLogger(__name__)

DEFAULT_DATA_INCREMENT = 10


class Orientation(str, Enum):
    """Cardinal facing direction of the satellite."""

    NORTH = "North"
    SOUTH = "South"
    EAST = "East"
    WEST = "West"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["Orientation"]:
        """Case-insensitive lookup. Returns None for empty or unknown text."""
        if not text:
            return None
        wanted = text.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None

    @classmethod
    def names(cls) -> str:
        return ", ".join(member.value for member in cls)


class PanelStatus(str, Enum):
    """Whether the solar panels are deployed and powered."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"

    @classmethod
    def parse(cls, text: Optional[str]) -> Optional["PanelStatus"]:
        """Case-insensitive lookup. Returns None for empty or unknown text."""
        if not text:
            return None
        wanted = text.strip().lower()
        for member in cls:
            if member.value.lower() == wanted:
                return member
        return None


class RotationRejection(str, Enum):
    """Reason a rotate request left the orientation unchanged."""

    EMPTY = "empty"
    UNKNOWN_DIRECTION = "unknown_direction"


@dataclass(frozen=True)
class SatelliteStatus:
    """Immutable snapshot of the satellite state."""

    orientation: Orientation
    panel_status: PanelStatus
    data_collected: int

    def describe(self) -> str:
        return (
            f"Orientation: {self.orientation.value}, "
            f"Solar Panels: {self.panel_status.value}, "
            f"Data Collected: {self.data_collected}"
        )


@dataclass(frozen=True)
class RotateOutcome:
    """Result of a rotate request."""

    accepted: bool
    orientation: Orientation
    rejection: Optional[RotationRejection] = None


class Satellite:
    """
    Single satellite state machine.

    Constructed once per session and handed to the dispatcher, which
    applies operations to it one at a time.
    """

    def __init__(
        self,
        orientation: Orientation = Orientation.NORTH,
        panel_status: PanelStatus = PanelStatus.INACTIVE,
        data_increment: int = DEFAULT_DATA_INCREMENT,
        console: Optional[Console] = None,
    ):
        if data_increment <= 0:
            raise ValueError(f"data_increment must be positive, got {data_increment}")
        self.orientation = orientation
        self.panel_status = panel_status
        self.data_collected = 0
        self.data_increment = data_increment
        self.console = console or Console()

    @classmethod
    def from_params(cls, params, console: Optional[Console] = None) -> "Satellite":
        """Build a satellite from validated SatelliteParams."""
        return cls(
            orientation=Orientation(params.initial_orientation),
            panel_status=PanelStatus(params.initial_panel_status),
            data_increment=params.data_increment,
            console=console,
        )

    def rotate(self, direction: Optional[str]) -> RotateOutcome:
        """Point the satellite at a cardinal direction (case-insensitive)."""
        if direction is None or not direction.strip():
            logger.warning("Rotation rejected: direction is empty")
            return RotateOutcome(False, self.orientation, RotationRejection.EMPTY)

        target = Orientation.parse(direction)
        if target is None:
            logger.warning(
                f"Rotation rejected: '{direction}' is not one of {Orientation.names()}"
            )
            return RotateOutcome(False, self.orientation, RotationRejection.UNKNOWN_DIRECTION)

        self.orientation = target
        logger.info(f"Satellite rotated to {target.value}")
        return RotateOutcome(True, target)

    def activate_panels(self) -> None:
        self.panel_status = PanelStatus.ACTIVE
        logger.info("Solar panels activated")

    def deactivate_panels(self) -> None:
        self.panel_status = PanelStatus.INACTIVE
        logger.info("Solar panels deactivated")

    def collect_data(self) -> int:
        """
        Attempt a data collection.

        Adds the increment while panels are active. With panels inactive the
        counter is reset to zero.

        Returns:
            The data collected total after the attempt
        """
        if self.panel_status is PanelStatus.ACTIVE:
            self.data_collected += self.data_increment
            logger.info(f"Data collected. Total: {self.data_collected}")
        else:
            self.data_collected = 0
            logger.info("Solar panels inactive. Data collected reset to 0")
        return self.data_collected

    def snapshot(self) -> SatelliteStatus:
        return SatelliteStatus(self.orientation, self.panel_status, self.data_collected)

    def status_line(self) -> str:
        return self.snapshot().describe()

    def print_status(self) -> None:
        """Print the current state as a single line."""
        self.console.print(self.status_line(), markup=False, highlight=False)
