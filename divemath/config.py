"""
Default planning settings from config.yaml.

Resolution order: built-in defaults, then config.yaml, then CLI overrides.
"""

import logging
import numbers
import os

import yaml

from .constants import WaterType

logger = logging.getLogger(__name__)


def _resolve_water(value) -> int:
    """Water type name ('fsw') or a custom depth per ATA (e.g. 32)."""
    if isinstance(value, str):
        return WaterType.from_name(value)
    if isinstance(value, bool):
        raise ValueError(f"depth_per_ata must be an integer, got {value!r}")
    if isinstance(value, numbers.Integral):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"depth_per_ata must be an integer, got {value!r}")


def load_effective_config(
    water_override=None,
    config_path: str = None,
) -> dict:
    """Load configuration from config.yaml with optional CLI water override.

    Returns a dict with resolved settings:
        depth_per_ata:  int (WaterType member for named water types)
        ppo2_working:   float
        ppo2_deco:      float
        baseline:       float, tank fill percentage
        config_path:    str (resolved path)
        water_source:   'cli' | 'config' | 'default'
    """
    if config_path is None:
        config_path = os.path.join(
            os.path.dirname(os.path.dirname(__file__)), "config.yaml"
        )

    # Defaults
    depth_per_ata = WaterType.FSW
    ppo2_working = 1.4
    ppo2_deco = 1.6
    baseline = 100.0
    water_source = "default"

    if os.path.exists(config_path):
        with open(config_path) as f:
            config = yaml.safe_load(f) or {}
        logger.debug(f"Loaded config from {config_path}")

        # A custom depth_per_ata wins over a named water type
        if config.get("depth_per_ata") is not None:
            depth_per_ata = _resolve_water(config["depth_per_ata"])
            water_source = "config"
        elif config.get("water_type") is not None:
            depth_per_ata = _resolve_water(config["water_type"])
            water_source = "config"

        ppo2_cfg = config.get("ppo2", {}) or {}
        ppo2_working = float(ppo2_cfg.get("working", ppo2_working))
        ppo2_deco = float(ppo2_cfg.get("deco", ppo2_deco))

        thirds_cfg = config.get("thirds", {}) or {}
        baseline = float(thirds_cfg.get("baseline", baseline))
    else:
        logger.debug(f"No config at {config_path}, using defaults")

    if water_override is not None:
        depth_per_ata = _resolve_water(water_override)
        water_source = "cli"

    if depth_per_ata == WaterType.MFW:
        logger.warning(
            "MFW depth_per_ata is 0 (unverified); depth to ATA conversions will fail"
        )

    return {
        "depth_per_ata": depth_per_ata,
        "ppo2_working": ppo2_working,
        "ppo2_deco": ppo2_deco,
        "baseline": baseline,
        "config_path": config_path,
        "water_source": water_source,
    }
