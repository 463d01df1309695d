#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Starship OS - Primary Ship Computer

Main entry point: confirms every handle to the primary ship computer is the
same object, then routes a batch of dispatch requests through it.

Usage:
    python -m starship_os.run_starship
    python -m starship_os.run_starship --requests 30 --seed 7
    starship-os --log-level DEBUG
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

import numpy as np

from .core.dispatch import (
    SAME_INSTANCE_MESSAGE,
    confirm_same_instance,
    dispatch_requests,
    format_dispatch,
)
from .core.registry import SingletonRegistry
from .core.ship_computer import ShipComputer
from .services.settings_service import SettingsService
from .utils.logging_utils import setup_logging


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments; unset options fall back to settings."""
    parser = argparse.ArgumentParser(
        prog        = "starship-os",
        description = "Primary ship computer: one shared instance, random subroutine dispatch",
    )
    parser.add_argument("--requests", type=int, default=None,
                        help="number of dispatch requests to issue")
    parser.add_argument("--checks", type=int, default=None,
                        help="number of handles fetched for the identity check")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the subroutine selector")
    parser.add_argument("--log-level", default=None,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="logging verbosity (logs go to stderr)")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the Starship OS demonstration.

    Returns:
        int: Exit code (0 for success)
    """
    args = parse_args(argv)
    logger = logging.getLogger(__name__)
    previous_factory = SingletonRegistry.factory

    try:
        settings = SettingsService()
        setup_logging(log_level=args.log_level or settings.log_level(),
                      log_file=settings.log_file())
        logger.info("Starting Starship OS")

        requests = args.requests if args.requests is not None else settings.dispatch_count()
        checks = args.checks if args.checks is not None else settings.identity_checks()
        seed = args.seed if args.seed is not None else settings.rng_seed()

        if seed is not None:
            if SingletonRegistry.install_factory(
                    lambda: ShipComputer(rng=np.random.default_rng(seed))):
                logger.info("Subroutine selector seeded with %d", seed)
            else:
                logger.warning("Ship computer already online; seed %d ignored", seed)

        if confirm_same_instance(checks):
            print(SAME_INSTANCE_MESSAGE + "\n")

        ship_os = SingletonRegistry.get_instance()
        for subroutine in dispatch_requests(ship_os, requests):
            print(format_dispatch(subroutine))

    except Exception as e:
        logger.exception(f"Fatal error in ship computer: {e}")
        return 1
    finally:
        # The seeded factory only applies to this run's construction
        SingletonRegistry.factory = previous_factory

    logger.info("Starship OS finished")
    return 0


if __name__ == "__main__":
    sys.exit(main())
