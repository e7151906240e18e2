"""
Rule-of-thirds gas planning.

A third of the usable gas is for the way out, a third for the way back and a
third is reserve. Turn pressure calculations are registered by kind in
THIRDS_CALCULATIONS so callers can queue a ThirdsCommand and run it later.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .errors import DomainError
from .formulas import round_pressure_for_thirds

logger = logging.getLogger(__name__)


def turn_pressure_precise(
    volume: float, pressure: int, baseline: float, tank_count: int
) -> int:
    """Turn pressure from gas volume, fill pressure and tank setup.

    turn = pressure - volume / ((baseline / 100) * tank_count), truncated.

    Args:
        volume: gas volume allotted for the outbound leg
        pressure: starting tank pressure
        baseline: fill percentage of the tanks (100 = full rated fill)
        tank_count: number of tanks sharing the gas

    Raises:
        DomainError: if baseline or tank_count is 0
    """
    if baseline == 0:
        raise DomainError("baseline", baseline)
    if tank_count == 0:
        raise DomainError("tank_count", tank_count)
    return int(pressure - (volume / ((baseline / 100) * tank_count)))


THIRDS_CALCULATIONS: Dict[str, Callable[[float, int, float, int], int]] = {
    "precise": turn_pressure_precise,
}


class ThirdsCommand:
    """Deferred turn pressure calculation.

    Inputs are fixed at construction. turn_pressure is None until execute()
    has run; executing again recomputes the same value.
    """

    def __init__(
        self,
        volume: float,
        pressure: int,
        baseline: float,
        tank_count: int,
        kind: str = "precise",
    ):
        if kind not in THIRDS_CALCULATIONS:
            raise ValueError(f"Unknown thirds calculation: {kind}")
        self._volume = volume
        self._pressure = pressure
        self._baseline = baseline
        self._tank_count = tank_count
        self._kind = kind
        self.turn_pressure: Optional[int] = None

    @classmethod
    def configure(
        cls,
        volume: float,
        pressure: int,
        baseline: float,
        tank_count: int,
        kind: str = "precise",
    ) -> "ThirdsCommand":
        """Build a command ready to execute."""
        return cls(volume, pressure, baseline, tank_count, kind=kind)

    @property
    def volume(self) -> float:
        return self._volume

    @property
    def pressure(self) -> int:
        return self._pressure

    @property
    def baseline(self) -> float:
        return self._baseline

    @property
    def tank_count(self) -> int:
        return self._tank_count

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def is_executed(self) -> bool:
        return self.turn_pressure is not None

    def execute(self) -> None:
        """Run the calculation and store the result in turn_pressure."""
        calc = THIRDS_CALCULATIONS[self._kind]
        self.turn_pressure = calc(
            self._volume, self._pressure, self._baseline, self._tank_count
        )
        logger.debug(f"{self!r} -> turn_pressure={self.turn_pressure}")

    def __repr__(self) -> str:
        return (
            f"ThirdsCommand(volume={self._volume}, pressure={self._pressure}, "
            f"baseline={self._baseline}, tank_count={self._tank_count}, "
            f"kind={self._kind!r})"
        )


@dataclass(frozen=True)
class ThirdsPlan:
    """Tank pressures for a rule-of-thirds dive.

    start:   starting tank pressure
    usable:  start rounded down so it divides into thirds
    third:   one third of the usable pressure
    turn:    pressure at which to turn the dive (one third used)
    reserve: pressure at which the exit should be complete (two thirds used)
    """
    start: int
    usable: int
    third: int
    turn: int
    reserve: int


def plan_thirds(pressure: int) -> ThirdsPlan:
    """Split a starting tank pressure into thirds.

    Example: 3469 -> usable 3300, third 1100, turn 2369, reserve 1269
    """
    usable = round_pressure_for_thirds(pressure)
    third = usable // 3
    plan = ThirdsPlan(
        start=pressure,
        usable=usable,
        third=third,
        turn=pressure - third,
        reserve=pressure - 2 * third,
    )
    logger.debug(f"Thirds plan for {pressure}: {plan}")
    return plan
