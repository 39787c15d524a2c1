"""
Models package - contains domain models (containers, Ship, errors)
"""

from .container import BasicContainer, Container, ContainerKind
from .errors import CapacityError, NotFoundError, OverfillError
from .factory import build_container
from .gas_container import GasContainer
from .hazard import HazardNotifier, supports_hazard_alerts
from .liquid_container import LiquidContainer
from .reefer_container import ReeferContainer
from .ship import Ship

__all__ = [
    "BasicContainer",
    "CapacityError",
    "Container",
    "ContainerKind",
    "GasContainer",
    "HazardNotifier",
    "LiquidContainer",
    "NotFoundError",
    "OverfillError",
    "ReeferContainer",
    "Ship",
    "build_container",
    "supports_hazard_alerts",
]
