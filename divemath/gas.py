"""Breathing gas mixes."""

import numbers
from dataclasses import dataclass

from .constants import AIR_O2_PERCENT
from .formulas import (
    best_o2_mix,
    equivalent_air_depth,
    equivalent_nitrogen_depth,
    max_operating_depth,
)


@dataclass(frozen=True)
class GasMix:
    """Gas mix as whole percentages of O2 and helium, remainder nitrogen.

    o2: oxygen percentage (1-100)
    he: helium percentage (0-100), 0 for air and nitrox
    """
    o2: int
    he: int = 0

    def __post_init__(self):
        for field_name in ("o2", "he"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, numbers.Integral):
                raise ValueError(
                    f"{field_name} must be a whole percentage, got {value!r}"
                )
        if not (0 < self.o2 <= 100):
            raise ValueError(f"o2 must be in (0, 100], got {self.o2}")
        if not (0 <= self.he <= 100):
            raise ValueError(f"he must be in [0, 100], got {self.he}")
        if self.o2 + self.he > 100:
            raise ValueError(
                f"o2 ({self.o2}) + he ({self.he}) must not exceed 100"
            )

    @property
    def n2(self) -> int:
        return 100 - self.o2 - self.he

    @property
    def is_air(self) -> bool:
        return self.o2 == AIR_O2_PERCENT and self.he == 0

    @property
    def is_trimix(self) -> bool:
        return self.he > 0

    @property
    def name(self) -> str:
        """Conventional name: Air, EAN32, TX18/45."""
        if self.is_air:
            return "Air"
        if self.is_trimix:
            return f"TX{self.o2}/{self.he}"
        return f"EAN{self.o2}"

    def mod(self, ppo2: float, depth_per_ata: int) -> int:
        """Maximum operating depth at a ppO2 limit."""
        return max_operating_depth(ppo2, self.o2, depth_per_ata)

    def ead(self, depth: int, depth_per_ata: int) -> int:
        """Equivalent air depth, based on the O2 percentage."""
        return equivalent_air_depth(self.o2, depth, depth_per_ata)

    def end(self, depth: int, depth_per_ata: int) -> int:
        """Equivalent nitrogen depth, based on the helium percentage."""
        return equivalent_nitrogen_depth(self.he, depth, depth_per_ata)

    @classmethod
    def best_for(cls, depth: int, ppo2: float, depth_per_ata: int) -> "GasMix":
        """Richest nitrox mix within ppo2 at depth, capped at pure O2."""
        o2 = round(best_o2_mix(depth, ppo2, depth_per_ata) * 100)
        return cls(o2=min(o2, 100))

    def __str__(self) -> str:
        return self.name
