#!/usr/bin/env python3
"""
Gas planning table CLI.

Prints MOD and EAD for a range of nitrox mixes, and a rule-of-thirds plan
for a starting tank pressure.

Usage:
    python run_gas_table.py                          # Defaults from config.yaml
    python run_gas_table.py --water msw --ppo2 1.4   # Metric sea water
    python run_gas_table.py --pressure 3469          # Add a thirds plan
    python run_gas_table.py --mixes 28 36            # Limit the mix range
"""

import argparse
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from divemath import DiveMathError, DomainError, load_effective_config, plan_thirds
from divemath.tables import ead_table, mod_table, nitrox_mixes

logger = logging.getLogger(__name__)

EAD_DEPTHS = (30, 60, 90, 120)


def setup_logging(verbose: bool = False):
    """Set up logging configuration."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=log_format,
    )


def print_gas_table(mixes, ppo2: float, depth_per_ata: int, depths=EAD_DEPTHS):
    """Print MOD and EAD columns for each mix."""
    mods = mod_table(mixes, ppo2, depth_per_ata)
    eads = ead_table(mixes, depths, depth_per_ata)

    print("\n" + "=" * 60)
    print(f"GAS TABLE (ppO2 {ppo2:.2f}, depth per ATA {int(depth_per_ata)})")
    print("=" * 60)
    header = f"{'Mix':>6} {'MOD':>6}" + "".join(f" {f'EAD@{d}':>8}" for d in depths)
    print(header)
    for o2, mod, row in zip(mixes, mods, eads):
        # EAD is meaningless past the mix's MOD
        cells = "".join(
            f" {ead:>8}" if d <= mod else f" {'-':>8}" for d, ead in zip(depths, row)
        )
        print(f"{f'EAN{o2}':>6} {mod:>6}{cells}")


def print_thirds_plan(pressure: int):
    """Print the rule-of-thirds split for a starting pressure."""
    plan = plan_thirds(pressure)
    print("\n" + "=" * 60)
    print(f"THIRDS PLAN ({pressure} start)")
    print("=" * 60)
    print(f"Usable:  {plan.usable}")
    print(f"Third:   {plan.third}")
    print(f"Turn:    {plan.turn}")
    print(f"Reserve: {plan.reserve}")


def main():
    parser = argparse.ArgumentParser(description="Nitrox MOD/EAD table and thirds plan")
    parser.add_argument("--water", default=None,
                        help="Water type (fsw, ffw, msw) or custom depth per ATA")
    parser.add_argument("--ppo2", type=float, default=None,
                        help="ppO2 limit (default: working ppO2 from config)")
    parser.add_argument("--mixes", type=int, nargs=2, metavar=("FROM", "TO"),
                        default=(21, 40), help="O2 percentage range")
    parser.add_argument("--pressure", type=int, default=None,
                        help="Starting tank pressure for a thirds plan")
    parser.add_argument("--config", default=None, help="Path to config.yaml")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    setup_logging(args.verbose)

    try:
        water = args.water
        if water is not None and water.isdigit():
            water = int(water)
        cfg = load_effective_config(water_override=water, config_path=args.config)
        logger.info(
            f"depth_per_ata={int(cfg['depth_per_ata'])} ({cfg['water_source']})"
        )
        if cfg["depth_per_ata"] <= 0:
            raise DomainError("depth_per_ata", cfg["depth_per_ata"], "must be positive")

        ppo2 = args.ppo2 if args.ppo2 is not None else cfg["ppo2_working"]
        mixes = nitrox_mixes(*args.mixes)
        print_gas_table(mixes, ppo2, cfg["depth_per_ata"])

        if args.pressure is not None:
            print_thirds_plan(args.pressure)
    except DiveMathError as e:
        print(f"ERROR: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"ERROR: {e}")
        sys.exit(2)


if __name__ == "__main__":
    main()
