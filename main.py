#!/usr/bin/env python3
"""
Cargo Fleet - CLI Entry Point

Usage:
    python main.py                  # Run the demonstration voyage
    python main.py --alerts         # Also list the alerts raised during the demo
    python main.py --notify         # Forward hazard alerts to Telegram
    python main.py --web            # Launch the web API
    python main.py --web --port 9000
"""

import argparse
import sys

from cargo_fleet.config.constants import DEMO_CONTAINERS, DEMO_SHIP
from cargo_fleet.models.errors import CargoFleetError, OverfillError
from cargo_fleet.models.factory import build_container
from cargo_fleet.models.ship import Ship
from cargo_fleet.services.alerts import AlertFeed, TelegramAlertForwarder
from cargo_fleet.utils.logger import get_logger

logger = get_logger("cargo_fleet.cli")


def run_demo(alerts=None, out=None):
    """
    Run the fixed demonstration voyage.

    Returns:
        The demo ship, in its final state
    """
    out = out or sys.stdout
    alerts = alerts if alerts is not None else AlertFeed()

    ship = Ship(**DEMO_SHIP)
    containers = {
        serial: build_container(serial, spec, alerts=alerts)
        for serial, spec in DEMO_CONTAINERS.items()
    }
    liquid_safe = containers["KON-C-1"]
    liquid_danger = containers["KON-C-2"]
    gas = containers["KON-C-3"]
    reefer = containers["KON-C-4"]

    liquid_safe.load(4000)
    liquid_danger.load(2500)

    ship.add_container(liquid_safe)
    ship.add_container(liquid_danger)
    ship.add_container(gas)

    try:
        gas.load(4500)
    except OverfillError as e:
        logger.error("Error loading gas: %s", e)

    ship.remove_container(liquid_danger.serial_number)
    ship.add_container(reefer)

    reefer.set_current_container_temp(10.0)

    print(ship.report(), file=out)
    print(file=out)

    gas.unload()
    print("After unloading the gas container:", file=out)
    print(ship.report(), file=out)
    print(file=out)
    return ship


def run_web(port):
    try:
        import uvicorn
    except ImportError:
        print("uvicorn is required for --web. Install with: pip install uvicorn")
        return 1
    uvicorn.run("cargo_fleet.web.app:app", host="0.0.0.0", port=port)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Cargo Fleet container ship model")
    parser.add_argument("--alerts", action="store_true", help="List alerts raised during the demo")
    parser.add_argument("--notify", action="store_true", help="Forward hazard alerts to Telegram")
    parser.add_argument("--web", action="store_true", help="Launch the web API")
    parser.add_argument("--port", type=int, default=8000, help="Web API port (default 8000)")
    args = parser.parse_args(argv)

    if args.web:
        return run_web(args.port)

    alerts = AlertFeed()
    if args.notify:
        forwarder = TelegramAlertForwarder()
        if not forwarder.is_configured:
            print("Set TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID environment variables.")
        alerts.subscribe(forwarder)

    try:
        run_demo(alerts=alerts)
    except CargoFleetError as e:
        logger.error("Error: %s", e)
        return 1

    if args.alerts:
        print(f"Alerts raised: {alerts.size}")
        for alert in alerts.alerts():
            print(f"  [{alert.level}] {alert.source}: {alert.message}")

    print("End of demonstration.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
