"""
Depth-per-atmosphere water types and fixed gas constants.

Depth = (ATA - 1) * depth_per_ata, where depth_per_ata is the column of water
(in feet or meters) that adds one atmosphere of pressure.
"""

from enum import IntEnum


class WaterType(IntEnum):
    """Depth units per atmosphere for common water types.

    FFW: feet of fresh water
    FSW: feet of sea water
    MSW: meters of sea water
    MFW: meters of fresh water. Unverified placeholder value of 0, kept as
         published. Any formula dividing by depth_per_ata rejects it.
    """
    FFW = 34
    FSW = 33
    MSW = 10
    MFW = 0

    @classmethod
    def from_name(cls, name: str) -> "WaterType":
        """Look up a water type by case-insensitive name, e.g. 'fsw'."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            valid = ", ".join(w.name for w in cls)
            raise ValueError(f"Unknown water type: {name!r} (expected one of {valid})") from None


FFW = WaterType.FFW
FSW = WaterType.FSW
MSW = WaterType.MSW
MFW = WaterType.MFW

# Inert gas (N2 + trace) fraction of air
AIR_INERT_FRACTION = 0.79

# O2 percentage of air
AIR_O2_PERCENT = 21

# Tank pressure is floored to this multiple before splitting into thirds
THIRDS_ROUNDING = 100
