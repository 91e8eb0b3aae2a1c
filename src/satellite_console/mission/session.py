"""
Interactive Command Session

Runs the round-based command loop against a single satellite:

1. Optional rotation (direction validation is left to the satellite)
2. Solar panel status update
3. Data collection attempt
4. Status report
5. Continue prompt

A closed or unreadable input stream ends the session gracefully.
"""

import logging
from typing import Optional

from rich.console import Console

from satellite_console.config.constants import Constants
from satellite_console.config.models import SessionParams
from satellite_console.core.error_handling import log_and_continue
from satellite_console.core.exceptions import InputStreamClosed
from satellite_console.core.operations import (
    ActivatePanels,
    CollectData,
    DeactivatePanels,
    Operation,
    OperationOutcome,
    Rotate,
    apply_operation,
)
from satellite_console.core.satellite import PanelStatus, Satellite
from satellite_console.mission.prompts import ConsolePrompter

logger = logging.getLogger(__name__)


class CommandSession:
    """
    Dispatches user answers to satellite operations, one round at a time.

    Answers arrive stripped of surrounding whitespace and are matched
    case-insensitively, so " yes " continues the loop and " east " rotates
    to East. Only "yes" counts as yes; "y" does not.

    Args:
        satellite: The satellite this session drives
        prompter: Answer source with an ask(message, choices) method
        console: Console for user-facing notices
        params: Session behaviour settings
    """

    def __init__(
        self,
        satellite: Satellite,
        prompter=None,
        console: Optional[Console] = None,
        params: Optional[SessionParams] = None,
    ):
        self.satellite = satellite
        self.prompter = prompter or ConsolePrompter()
        self.console = console or satellite.console
        self.params = params or SessionParams()
        self.rounds_completed = 0

    @log_and_continue("Satellite operation")
    def execute(self, operation: Operation) -> Optional[OperationOutcome]:
        """Apply one operation; failures are logged and never escape."""
        outcome = apply_operation(self.satellite, operation)
        if outcome.accepted and self.params.echo_status_after_command:
            logger.info(outcome.status.describe())
        return outcome

    def _answered_yes(self, message: str) -> bool:
        answer = self.prompter.ask(message, Constants.YES_NO_CHOICES)
        return answer.lower() == Constants.YES

    def _panel_operation(self, answer: str) -> Optional[Operation]:
        status = PanelStatus.parse(answer)
        if status is PanelStatus.ACTIVE:
            return ActivatePanels()
        if status is PanelStatus.INACTIVE:
            return DeactivatePanels()
        return None

    def run_round(self) -> bool:
        """
        Run a single round.

        Returns:
            True if the user asked to continue

        Raises:
            InputStreamClosed: If an answer could not be read
        """
        if self._answered_yes(Constants.ROTATE_PROMPT):
            direction = self.prompter.ask(Constants.DIRECTION_PROMPT, Constants.DIRECTION_CHOICES)
            self.execute(Rotate(direction))

        panel_answer = self.prompter.ask(Constants.PANEL_PROMPT, Constants.PANEL_CHOICES)
        panel_operation = self._panel_operation(panel_answer)
        if panel_operation is None:
            self.console.print(Constants.INVALID_PANEL_MESSAGE, markup=False, highlight=False)
            logger.warning(f"Invalid solar panel status '{panel_answer}', status unchanged")
        else:
            self.execute(panel_operation)

        self.execute(CollectData())
        self.satellite.print_status()
        self.rounds_completed += 1

        return self._answered_yes(Constants.CONTINUE_PROMPT)

    def run(self) -> int:
        """
        Run rounds until the user declines to continue or input fails.

        Returns:
            Number of rounds that reached the status report
        """
        logger.info("Satellite command session started")
        while True:
            try:
                keep_going = self.run_round()
            except InputStreamClosed as e:
                logger.critical(f"Input unavailable, ending session: {e}")
                break
            if not keep_going:
                break
        logger.info(f"Satellite command session ended after {self.rounds_completed} round(s)")
        return self.rounds_completed
