"""Tests for turn pressure calculations, ThirdsCommand and thirds plans."""

from dataclasses import FrozenInstanceError

import pytest

from divemath.errors import DomainError
from divemath.thirds import (
    THIRDS_CALCULATIONS,
    ThirdsCommand,
    ThirdsPlan,
    plan_thirds,
    turn_pressure_precise,
)


class TestTurnPressurePrecise:
    """turn = pressure - volume / ((baseline / 100) * tank_count), truncated."""

    def test_doubles_full_fill(self):
        """3000 - 500 / (1.0 * 2) = 2750."""
        assert turn_pressure_precise(500, 3000, 100, 2) == 2750

    def test_truncates(self):
        """1000 - 1001 / 2 = 499.5 -> 499."""
        assert turn_pressure_precise(1001, 1000, 100, 2) == 499

    def test_partial_fill(self):
        """3000 - 1000 / (0.8 * 3) = 2583.3 -> 2583."""
        assert turn_pressure_precise(1000, 3000, 80, 3) == 2583

    def test_zero_baseline_raises(self):
        with pytest.raises(DomainError, match="baseline"):
            turn_pressure_precise(500, 3000, 0, 2)

    def test_zero_tank_count_raises(self):
        with pytest.raises(DomainError, match="tank_count"):
            turn_pressure_precise(500, 3000, 100, 0)

    def test_registered_as_precise(self):
        assert THIRDS_CALCULATIONS["precise"] is turn_pressure_precise


class TestThirdsCommand:
    """Configure, execute, then read turn_pressure."""

    def test_not_executed_initially(self):
        cmd = ThirdsCommand(500, 3000, 100, 2)
        assert cmd.turn_pressure is None
        assert not cmd.is_executed

    def test_execute(self):
        cmd = ThirdsCommand(500, 3000, 100, 2)
        result = cmd.execute()
        assert result is None
        assert cmd.turn_pressure == 2750
        assert cmd.is_executed

    def test_execute_is_idempotent(self):
        cmd = ThirdsCommand(500, 3000, 100, 2)
        cmd.execute()
        first = cmd.turn_pressure
        cmd.execute()
        assert cmd.turn_pressure == first == 2750

    def test_configure(self):
        cmd = ThirdsCommand.configure(volume=500, pressure=3000, baseline=100, tank_count=2)
        assert isinstance(cmd, ThirdsCommand)
        assert cmd.volume == 500
        assert cmd.pressure == 3000
        assert cmd.baseline == 100
        assert cmd.tank_count == 2
        assert cmd.kind == "precise"

    def test_inputs_are_read_only(self):
        cmd = ThirdsCommand(500, 3000, 100, 2)
        with pytest.raises(AttributeError):
            cmd.pressure = 2000

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError, match="Unknown thirds calculation"):
            ThirdsCommand(500, 3000, 100, 2, kind="rounded")

    def test_zero_tank_count_raises_on_execute(self):
        cmd = ThirdsCommand(500, 3000, 100, 0)
        with pytest.raises(DomainError, match="tank_count"):
            cmd.execute()
        assert cmd.turn_pressure is None

    def test_queue_of_pending_commands(self):
        """Commands can be built up front and run later."""
        pending = [
            ThirdsCommand(500, 3000, 100, 2),
            ThirdsCommand(1000, 3000, 80, 3),
        ]
        for cmd in pending:
            cmd.execute()
        assert [c.turn_pressure for c in pending] == [2750, 2583]

    def test_repr(self):
        assert "tank_count=2" in repr(ThirdsCommand(500, 3000, 100, 2))


class TestPlanThirds:
    """Rule-of-thirds split of a starting pressure."""

    def test_documented_example(self):
        plan = plan_thirds(3469)
        assert plan == ThirdsPlan(
            start=3469, usable=3300, third=1100, turn=2369, reserve=1269
        )

    def test_even_pressure(self):
        plan = plan_thirds(3000)
        assert plan.usable == 3000
        assert plan.third == 1000
        assert plan.turn == 2000
        assert plan.reserve == 1000

    def test_turn_above_reserve(self):
        for pressure in range(300, 4000, 37):
            plan = plan_thirds(pressure)
            assert plan.start >= plan.turn >= plan.reserve
            assert plan.third * 3 == plan.usable

    def test_frozen(self):
        plan = plan_thirds(3000)
        with pytest.raises(FrozenInstanceError):
            plan.turn = 0
