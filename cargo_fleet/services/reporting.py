"""
Fleet-level reporting built on the per-ship and per-container descriptions.
"""

from __future__ import annotations

from cargo_fleet.models.hazard import supports_hazard_alerts
from cargo_fleet.models.ship import Ship


def ship_summary(ship: Ship) -> dict:
    """Compact utilisation summary of one ship."""
    total = ship.total_mass_tonnes()
    count = len(ship)
    hazard_flagged = [
        c.serial_number for c in ship.containers
        if supports_hazard_alerts(c) and c.hazard_flag
    ]
    return {
        "name": ship.name,
        "containers": count,
        "total_mass_t": round(total, 3),
        "slot_utilisation_pct": round(100.0 * count / ship.max_container_num, 1)
        if ship.max_container_num else 0.0,
        "mass_utilisation_pct": round(100.0 * total / ship.max_weight, 1)
        if ship.max_weight else 0.0,
        "hazard_flagged": hazard_flagged,
    }


def fleet_report(ships: list[Ship]) -> str:
    """Every ship's report followed by a one-line fleet total."""
    sections = [ship.report() for ship in ships]
    total_containers = sum(len(s) for s in ships)
    total_mass = sum(s.total_mass_tonnes() for s in ships)
    sections.append(
        f"Fleet: {len(ships)} ships, {total_containers} containers, {total_mass:.2f} t"
    )
    return "\n\n".join(sections)
