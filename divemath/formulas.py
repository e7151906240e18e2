"""
Pressure, depth and gas-mix formulas.

Most calculations derive from the pressure formula:

    Pg = Fg * P

where Pg is the partial pressure of a gas, Fg the fraction of that gas in
the mix, and P the total ambient pressure in ATA. Depth and ATA are related
through the water type's depth per atmosphere:

    depth = (P - 1) * depth_per_ata

All functions are pure. Rounding differs per function and is part of each
contract: MOD and ATA->depth truncate, best mix truncates down to a whole
percent, EAD/END round to the nearest integer, depth->ATA rounds to 2 places.
Python's round() is round-half-to-even.

Inputs outside the physical range (negative depth, fractions over 100) are
not validated. Zero divisors raise DomainError.
"""

from .constants import AIR_INERT_FRACTION, THIRDS_ROUNDING
from .errors import DomainError


def ata_to_depth(ata: float, depth_per_ata: int) -> int:
    """Convert atmospheres absolute to depth, truncated toward zero.

    Example: 1.5 ATA in FSW -> 16.5 -> 16
    """
    depth = (ata - 1) * depth_per_ata
    return int(depth)


def depth_to_ata(depth: int, depth_per_ata: int) -> float:
    """Convert depth to atmospheres absolute, rounded to 2 decimals.

    Raises:
        DomainError: if depth_per_ata is 0 (e.g. WaterType.MFW)
    """
    if depth_per_ata == 0:
        raise DomainError("depth_per_ata", depth_per_ata)
    ata = depth / depth_per_ata + 1
    return round(ata, 2)


def best_o2_mix(depth: int, ppo2: float, depth_per_ata: int) -> float:
    """Richest O2 fraction that stays within ppo2 at the given depth.

    Fg = Pg / P, truncated down to the whole percent so the result never
    exceeds the ppO2 limit.

    Returns:
        O2 fraction, e.g. 0.32 for EAN32
    """
    ata = depth_to_ata(depth, depth_per_ata)
    if ata == 0:
        raise DomainError("ata", ata)
    o2 = ppo2 / ata
    int_o2 = int(o2 * 100)
    return int_o2 / 100.0


def equivalent_air_depth(o2_percent: int, depth: int, depth_per_ata: int) -> int:
    """Depth at which air gives the same N2 partial pressure as the mix."""
    ead = ((1.0 - o2_percent / 100.0) * (depth + depth_per_ata)) / AIR_INERT_FRACTION
    return round(ead - depth_per_ata)


def equivalent_nitrogen_depth(helium_percent: int, depth: int, depth_per_ata: int) -> int:
    """Depth at which a helium-free mix gives the same narcotic load."""
    end = (1 - helium_percent / 100.0) * (depth + depth_per_ata) - depth_per_ata
    return round(end)


def max_operating_depth(ppo2: float, o2_percent: int, depth_per_ata: int) -> int:
    """Maximum operating depth for an O2 percentage at a ppO2 limit.

    P = Pg / Fg, converted to depth with ata_to_depth (truncated).

    Example: ppo2=1.4, EAN32, FSW -> 4.375 ATA -> 111.375 -> 111

    Raises:
        DomainError: if o2_percent is 0
    """
    if o2_percent == 0:
        raise DomainError("o2_percent", o2_percent)
    ata = ppo2 / (o2_percent / 100.0)
    return ata_to_depth(ata, depth_per_ata)


def max_operating_depth_trimix(o2_percent: int, helium_percent: int) -> int:
    """Maximum operating depth from O2 and helium fractions.

    Not implemented: there is no agreed formula taking only the two gas
    fractions, so this raises instead of returning a misleading depth.
    Use max_operating_depth with the mix's O2 percentage.
    """
    raise NotImplementedError(
        f"MOD from O2 and He fractions is not implemented "
        f"(o2_percent={o2_percent}, helium_percent={helium_percent})"
    )


def round_pressure_for_thirds(pressure: int) -> int:
    """Round tank pressure down so it splits evenly into thirds.

    The pressure is floored to the hundreds, then reduced by
    (rounded % 3) hundreds so the result divides by 300.

    Example: 3469 -> 3400 -> 3400 % 3 == 1 -> 3300
    """
    rounded = (pressure // THIRDS_ROUNDING) * THIRDS_ROUNDING
    remainder = rounded % 3
    return rounded - remainder * THIRDS_ROUNDING
