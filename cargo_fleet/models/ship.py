"""
Ship model - carries containers within a count and mass limit
"""

from __future__ import annotations

from cargo_fleet.config.constants import kg_to_tonnes
from cargo_fleet.models.container import Container
from cargo_fleet.models.errors import CapacityError, NotFoundError
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


class Ship:
    """
    A container ship.

    Containers are kept in boarding order. The ship does not check serial
    numbers for uniqueness and does not know about other ships; the fleet
    registry adds those rules on top.
    """

    def __init__(self, name: str, speed: float, max_container_num: int, max_weight: float):
        """
        Args:
            name: ship name
            speed: cruising speed in knots
            max_container_num: maximum number of containers aboard
            max_weight: maximum total container mass in tonnes
        """
        if max_container_num < 0:
            raise ValueError(f"max_container_num must be non-negative, got {max_container_num}")
        if max_weight < 0:
            raise ValueError(f"max_weight must be non-negative, got {max_weight}")
        self.name = name
        self.speed = float(speed)
        self.max_container_num = int(max_container_num)
        self.max_weight = float(max_weight)
        self._containers: list[Container] = []

    @property
    def containers(self) -> tuple[Container, ...]:
        return tuple(self._containers)

    def __len__(self):
        return len(self._containers)

    def __contains__(self, serial_number):
        return self.find_container(serial_number) is not None

    def add_container(self, container: Container):
        """
        Board a container at the end of the boarding order.

        The count limit is checked before the mass limit.

        Raises:
            CapacityError: the ship is full or would become too heavy;
                the container is not boarded
        """
        if len(self._containers) >= self.max_container_num:
            logger.warning("Ship %s refused %s: container limit %d reached",
                           self.name, container.serial_number, self.max_container_num)
            raise CapacityError(
                self.name,
                f"Cannot add container: container limit exceeded on ship {self.name}",
            )

        prospective = kg_to_tonnes(self.total_mass_kg() + container.gross_weight)
        if prospective > self.max_weight:
            logger.warning("Ship %s refused %s: %.2f t would exceed %.2f t",
                           self.name, container.serial_number, prospective, self.max_weight)
            raise CapacityError(
                self.name,
                f"Cannot add container: maximum weight (tonnes) exceeded on ship {self.name}",
            )

        self._containers.append(container)
        logger.info("Ship %s boarded %s (%.2f t aboard)", self.name, container.serial_number, prospective)

    def remove_container(self, serial_number: str) -> Container:
        """
        Take the first container with this serial number off the ship.

        The container keeps its cargo.

        Raises:
            NotFoundError: no such container aboard
        """
        container = self._containers.pop(self.index_of(serial_number))
        logger.info("Ship %s discharged %s", self.name, serial_number)
        return container

    def index_of(self, serial_number: str) -> int:
        """
        Position of the first container with this serial number in boarding order.

        Raises:
            NotFoundError: no such container aboard
        """
        for index, container in enumerate(self._containers):
            if container.serial_number == serial_number:
                return index
        raise NotFoundError(self.name, serial_number)

    def restore_container(self, index: int, container: Container):
        """
        Put a just-removed container back at its old position.

        Count and mass limits are not checked.
        """
        self._containers.insert(index, container)
        logger.info("Ship %s restored %s at position %d", self.name, container.serial_number, index)

    def find_container(self, serial_number: str) -> Container | None:
        for container in self._containers:
            if container.serial_number == serial_number:
                return container
        return None

    def total_mass_tonnes(self) -> float:
        """Mass of all containers aboard including cargo, in tonnes."""
        return kg_to_tonnes(self.total_mass_kg())

    def total_mass_kg(self) -> float:
        """Mass of all containers aboard including cargo, in kg."""
        return sum(c.gross_weight for c in self._containers)

    def remaining_capacity(self) -> dict:
        return {
            "slots": self.max_container_num - len(self._containers),
            "tonnes": round(self.max_weight - self.total_mass_tonnes(), 3),
        }

    def report(self) -> str:
        lines = [
            f"=== Ship: {self.name} ===",
            f"Speed (knots): {self.speed:g}",
            f"Max containers: {self.max_container_num}",
            f"Max weight (tonnes): {self.max_weight:g}",
            f"Currently aboard: {len(self._containers)} containers.",
        ]
        for container in self._containers:
            lines.append(f"   -> {container.describe()}")
        lines.append(f"Total container mass (with cargo): {self.total_mass_tonnes():.2f} t")
        return "\n".join(lines)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "speed_knots": self.speed,
            "max_container_num": self.max_container_num,
            "max_weight_t": self.max_weight,
            "total_mass_t": round(self.total_mass_tonnes(), 3),
            "remaining": self.remaining_capacity(),
            "containers": [c.to_dict() for c in self._containers],
        }

    def __repr__(self):
        return f"Ship({self.name!r}, {len(self._containers)}/{self.max_container_num} containers)"
