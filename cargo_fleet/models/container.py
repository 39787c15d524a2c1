"""
Container model - base class shared by every container variant
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from enum import Enum

from cargo_fleet.config.constants import kg_to_tonnes
from cargo_fleet.models.errors import OverfillError
from cargo_fleet.services.alerts import AlertFeed, alert_feed
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


class ContainerKind(str, Enum):
    """Closed set of container variants."""
    BASIC = "BASIC"
    LIQUID = "LIQUID"
    GAS = "GAS"
    REEFER = "REEFER"


class Container(ABC):
    """
    A cargo container.

    Identity and physical data are fixed at construction; only the cargo
    mass (current_load) changes, and only through load() and unload().
    All masses are in kg, dimensions in cm.
    """

    def __init__(
        self,
        serial_number: str,
        container_weight: float,
        max_load_weight: float,
        height: float,
        depth: float,
        alerts: AlertFeed | None = None,
    ):
        if container_weight < 0:
            raise ValueError(f"container_weight must be non-negative, got {container_weight}")
        if max_load_weight < 0:
            raise ValueError(f"max_load_weight must be non-negative, got {max_load_weight}")

        self._serial_number = serial_number
        self._container_weight = float(container_weight)
        self._max_load_weight = float(max_load_weight)
        self._height = float(height)
        self._depth = float(depth)
        self._current_load = 0.0
        self.alerts = alerts if alerts is not None else alert_feed

    @property
    @abstractmethod
    def kind(self) -> ContainerKind:
        """Variant tag."""

    @property
    def serial_number(self) -> str:
        return self._serial_number

    @property
    def container_weight(self) -> float:
        return self._container_weight

    @property
    def max_load_weight(self) -> float:
        return self._max_load_weight

    @property
    def height(self) -> float:
        return self._height

    @property
    def depth(self) -> float:
        return self._depth

    @property
    def current_load(self) -> float:
        return self._current_load

    @property
    def load_ceiling(self) -> float:
        """Highest current_load this variant accepts."""
        return self._max_load_weight

    @property
    def gross_weight(self) -> float:
        """Empty weight plus cargo, in kg."""
        return self._container_weight + self._current_load

    def load(self, mass: float):
        """
        Add cargo to the container.

        Raises:
            ValueError: mass is negative or not a finite number
            OverfillError: the result would exceed max_load_weight;
                current_load is left unchanged
        """
        self._check_mass(mass)
        if self._current_load + mass > self._max_load_weight:
            raise OverfillError(self._serial_number)
        self._current_load += mass
        logger.debug("Loaded %s kg into %s (now %s kg)", mass, self._serial_number, self._current_load)

    def _check_mass(self, mass: float):
        if not math.isfinite(mass):
            raise ValueError(f"Cannot load a non-finite mass ({mass}) into {self._serial_number}")
        if mass < 0:
            raise ValueError(f"Cannot load a negative mass ({mass}) into {self._serial_number}")

    def unload(self):
        """Empty the container."""
        self._current_load = 0.0
        logger.debug("Unloaded %s", self._serial_number)

    def describe(self) -> str:
        return (
            f"[{self._serial_number}] "
            f"Container weight: {self._container_weight:g} kg, "
            f"Max load: {self._max_load_weight:g} kg, "
            f"Current load: {self._current_load:g} kg, "
            f"Height: {self._height:g} cm, Depth: {self._depth:g} cm"
        )

    def to_dict(self) -> dict:
        return {
            "serial_number": self._serial_number,
            "kind": self.kind.value,
            "container_weight_kg": self._container_weight,
            "max_load_weight_kg": self._max_load_weight,
            "load_ceiling_kg": self.load_ceiling,
            "current_load_kg": self._current_load,
            "gross_weight_t": round(kg_to_tonnes(self.gross_weight), 3),
            "height_cm": self._height,
            "depth_cm": self._depth,
        }

    def __repr__(self):
        return (f"{type(self).__name__}({self._serial_number!r}, "
                f"load={self._current_load:g}/{self._max_load_weight:g} kg)")


class BasicContainer(Container):
    """General-purpose container with no extra loading policy."""

    kind = ContainerKind.BASIC
