"""
Unit tests for operation values and apply_operation.
"""

import pytest

from satellite_console.core.operations import (
    ActivatePanels,
    CollectData,
    DeactivatePanels,
    Rotate,
    apply_operation,
)
from satellite_console.core.satellite import Orientation, PanelStatus, RotationRejection


@pytest.mark.unit
class TestApplyOperation:
    def test_rotate_accepted(self, satellite):
        outcome = apply_operation(satellite, Rotate("west"))
        assert outcome.accepted
        assert outcome.status.orientation is Orientation.WEST
        assert outcome.operation == Rotate("west")

    def test_rotate_rejected_carries_reason(self, satellite):
        outcome = apply_operation(satellite, Rotate("up"))
        assert not outcome.accepted
        assert outcome.rejection is RotationRejection.UNKNOWN_DIRECTION
        assert outcome.status.orientation is Orientation.NORTH

    def test_panel_operations(self, satellite):
        assert apply_operation(satellite, ActivatePanels()).status.panel_status is PanelStatus.ACTIVE
        assert (
            apply_operation(satellite, DeactivatePanels()).status.panel_status
            is PanelStatus.INACTIVE
        )

    def test_collect_data_sequence(self, satellite):
        apply_operation(satellite, ActivatePanels())
        apply_operation(satellite, CollectData())
        outcome = apply_operation(satellite, CollectData())
        assert outcome.status.data_collected == 20

        apply_operation(satellite, DeactivatePanels())
        assert apply_operation(satellite, CollectData()).status.data_collected == 0

    def test_unknown_operation_is_type_error(self, satellite):
        with pytest.raises(TypeError):
            apply_operation(satellite, "rotate")

    def test_operations_are_values(self):
        assert Rotate("East") == Rotate("East")
        assert ActivatePanels() == ActivatePanels()
        assert hash(CollectData()) == hash(CollectData())
