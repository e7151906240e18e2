"""
Vectorized planning tables.

numpy versions of the MOD / EAD / END formulas evaluated across a range of
mixes and depths. Each cell matches the scalar function in formulas.py:
truncation uses np.trunc and nearest-integer rounding uses np.rint
(round-half-to-even, like Python's round).
"""

import logging
from typing import Sequence

import numpy as np

from .constants import AIR_INERT_FRACTION
from .errors import DomainError

logger = logging.getLogger(__name__)


def nitrox_mixes(start: int = 21, stop: int = 40, step: int = 1) -> np.ndarray:
    """O2 percentages from start to stop inclusive."""
    if step <= 0:
        raise ValueError(f"step must be positive, got {step}")
    return np.arange(start, stop + 1, step, dtype=int)


def mod_table(
    o2_percents: Sequence[int], ppo2: float, depth_per_ata: int
) -> np.ndarray:
    """Maximum operating depth for each O2 percentage.

    Returns:
        int array, shape (len(o2_percents),)
    """
    o2 = np.asarray(o2_percents, dtype=float)
    depth_per_ata = int(depth_per_ata)
    if np.any(o2 == 0):
        raise DomainError("o2_percent", 0)
    ata = ppo2 / (o2 / 100.0)
    depth = np.trunc((ata - 1) * depth_per_ata).astype(int)
    logger.debug(f"MOD table: {len(o2)} mixes at ppO2 {ppo2}")
    return depth


def ead_table(
    o2_percents: Sequence[int], depths: Sequence[int], depth_per_ata: int
) -> np.ndarray:
    """Equivalent air depth grid.

    Returns:
        int array, shape (len(o2_percents), len(depths)); rows are mixes,
        columns are depths
    """
    o2 = np.asarray(o2_percents, dtype=float)[:, np.newaxis]
    d = np.asarray(depths, dtype=float)[np.newaxis, :]
    depth_per_ata = int(depth_per_ata)
    ead = ((1.0 - o2 / 100.0) * (d + depth_per_ata)) / AIR_INERT_FRACTION
    return np.rint(ead - depth_per_ata).astype(int)


def end_table(
    helium_percents: Sequence[int], depths: Sequence[int], depth_per_ata: int
) -> np.ndarray:
    """Equivalent nitrogen depth grid.

    Returns:
        int array, shape (len(helium_percents), len(depths))
    """
    he = np.asarray(helium_percents, dtype=float)[:, np.newaxis]
    d = np.asarray(depths, dtype=float)[np.newaxis, :]
    depth_per_ata = int(depth_per_ata)
    end = (1 - he / 100.0) * (d + depth_per_ata) - depth_per_ata
    return np.rint(end).astype(int)
