"""
Scuba gas and depth physics.

Modules:
    - constants: Depth-per-ATA water types and fixed gas constants
    - formulas: Pressure/depth conversions, best mix, EAD/END, MOD, thirds rounding
    - thirds: Turn pressure calculations and the thirds command
    - gas: Validated gas mix with MOD/EAD/END helpers
    - tables: Vectorized planning tables across mixes and depths
    - config: YAML defaults for water type, ppO2 limits and fill baseline
"""

from .constants import WaterType, FFW, FSW, MSW, MFW
from .errors import DiveMathError, DomainError
from .formulas import (
    ata_to_depth,
    depth_to_ata,
    best_o2_mix,
    equivalent_air_depth,
    equivalent_nitrogen_depth,
    max_operating_depth,
    max_operating_depth_trimix,
    round_pressure_for_thirds,
)
from .thirds import ThirdsCommand, ThirdsPlan, plan_thirds, turn_pressure_precise
from .gas import GasMix
from .config import load_effective_config

__all__ = [
    "WaterType",
    "FFW",
    "FSW",
    "MSW",
    "MFW",
    "DiveMathError",
    "DomainError",
    "ata_to_depth",
    "depth_to_ata",
    "best_o2_mix",
    "equivalent_air_depth",
    "equivalent_nitrogen_depth",
    "max_operating_depth",
    "max_operating_depth_trimix",
    "round_pressure_for_thirds",
    "ThirdsCommand",
    "ThirdsPlan",
    "plan_thirds",
    "turn_pressure_precise",
    "GasMix",
    "load_effective_config",
]
