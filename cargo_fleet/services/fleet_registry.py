"""
Fleet registry - a thread-safe service layer over ships and containers.

Ship and container objects on their own are single-threaded. The registry
serializes every mutation:
  - one lock per ship, held for the whole admission check + append
  - one lock per container, held for load/unload
  - locks are always taken container first, then ships in name order

It also adds the rules a Ship does not enforce by itself:
  - serial numbers are unique across the registry
  - a container is aboard at most one ship at a time
"""

from __future__ import annotations

import threading
from contextlib import ExitStack

from cargo_fleet.config.constants import kg_to_tonnes
from cargo_fleet.models.container import Container
from cargo_fleet.models.errors import (
    AlreadyAboardError,
    CapacityError,
    DuplicateSerialError,
    UnknownContainerError,
    UnknownShipError,
)
from cargo_fleet.models.ship import Ship
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


class FleetRegistry:
    """Ships by name, containers by serial number, and where each container is."""

    def __init__(self):
        self._lock = threading.Lock()
        self._ships: dict[str, Ship] = {}
        self._containers: dict[str, Container] = {}
        self._ship_locks: dict[str, threading.Lock] = {}
        self._container_locks: dict[str, threading.Lock] = {}
        self._location: dict[str, str] = {}   # serial -> ship name

    # ------------------------------------------------------------------
    # Registration and lookup
    # ------------------------------------------------------------------

    def register_ship(self, ship: Ship) -> Ship:
        """
        Register a ship together with any containers already aboard it.

        Nothing is registered if any check fails.

        Raises:
            ValueError: a ship with this name is already registered
            DuplicateSerialError: a container aboard shares its serial number
                with another container aboard or with a different registered one
            AlreadyAboardError: a container aboard is registered as aboard
                another ship
        """
        with self._lock:
            if ship.name in self._ships:
                raise ValueError(f"Ship already registered: {ship.name}")
            seen = set()
            for container in ship.containers:
                serial = container.serial_number
                if serial in seen:
                    raise DuplicateSerialError(serial)
                seen.add(serial)
                known = self._containers.get(serial)
                if known is not None and known is not container:
                    raise DuplicateSerialError(serial)
                current = self._location.get(serial)
                if current is not None:
                    raise AlreadyAboardError(serial, current)

            self._ships[ship.name] = ship
            self._ship_locks[ship.name] = threading.Lock()
            for container in ship.containers:
                serial = container.serial_number
                if serial not in self._containers:
                    self._containers[serial] = container
                    self._container_locks[serial] = threading.Lock()
                self._location[serial] = ship.name
        logger.info("Registered ship %s with %d containers", ship.name, len(ship))
        return ship

    def register_container(self, container: Container) -> Container:
        """
        Raises:
            DuplicateSerialError: the serial number is already taken
        """
        with self._lock:
            if container.serial_number in self._containers:
                raise DuplicateSerialError(container.serial_number)
            self._containers[container.serial_number] = container
            self._container_locks[container.serial_number] = threading.Lock()
        logger.info("Registered container %s (%s)", container.serial_number, container.kind.value)
        return container

    def get_ship(self, name: str) -> Ship:
        with self._lock:
            ship = self._ships.get(name)
        if ship is None:
            raise UnknownShipError(name)
        return ship

    def get_container(self, serial_number: str) -> Container:
        with self._lock:
            container = self._containers.get(serial_number)
        if container is None:
            raise UnknownContainerError(serial_number)
        return container

    def location_of(self, serial_number: str) -> str | None:
        """Name of the ship the container is aboard, or None if ashore."""
        self.get_container(serial_number)
        with self._lock:
            return self._location.get(serial_number)

    @property
    def ships(self) -> list[Ship]:
        with self._lock:
            return list(self._ships.values())

    @property
    def containers(self) -> list[Container]:
        with self._lock:
            return list(self._containers.values())

    # ------------------------------------------------------------------
    # Boarding
    # ------------------------------------------------------------------

    def board(self, ship_name: str, serial_number: str):
        """
        Put a registered container aboard a registered ship.

        Raises:
            AlreadyAboardError: the container is aboard some ship already
            CapacityError: the ship refused it
        """
        ship = self.get_ship(ship_name)
        container = self.get_container(serial_number)
        with self._container_locks[serial_number], self._ship_locks[ship_name]:
            current = self._location_locked(serial_number)
            if current is not None:
                raise AlreadyAboardError(serial_number, current)
            ship.add_container(container)
            self._set_location(serial_number, ship_name)

    def discharge(self, ship_name: str, serial_number: str) -> Container:
        """
        Take a container off a ship.

        Raises:
            NotFoundError: the container is not aboard this ship
        """
        ship = self.get_ship(ship_name)
        self.get_container(serial_number)
        with self._container_locks[serial_number], self._ship_locks[ship_name]:
            container = ship.remove_container(serial_number)
            self._set_location(serial_number, None)
        return container

    def transfer(self, serial_number: str, to_ship: str):
        """
        Move a container from its current ship to another one.

        If the target ship refuses it, the container goes back to its old
        position aboard the ship it came from and the error is re-raised.

        Raises:
            ValueError: the container is not aboard any ship
            CapacityError: the target ship refused it
        """
        target = self.get_ship(to_ship)
        container = self.get_container(serial_number)
        with self._container_locks[serial_number]:
            from_ship = self._location_locked(serial_number)
            if from_ship is None:
                raise ValueError(f"Container {serial_number} is not aboard any ship")
            if from_ship == to_ship:
                return
            source = self.get_ship(from_ship)
            with ExitStack() as stack:
                for name in sorted((from_ship, to_ship)):
                    stack.enter_context(self._ship_locks[name])
                index = source.index_of(serial_number)
                source.remove_container(serial_number)
                try:
                    target.add_container(container)
                except CapacityError:
                    source.restore_container(index, container)
                    raise
                self._set_location(serial_number, to_ship)
        logger.info("Transferred %s from %s to %s", serial_number, from_ship, to_ship)

    # ------------------------------------------------------------------
    # Cargo operations
    # ------------------------------------------------------------------

    def load(self, serial_number: str, mass: float):
        """
        Load cargo into a container.

        When the container is aboard a ship, the ship's mass limit is
        checked as well.

        Raises:
            OverfillError: the container refused the load
            CapacityError: the ship would become too heavy
        """
        container = self.get_container(serial_number)
        with self._container_locks[serial_number]:
            ship_name = self._location_locked(serial_number)
            if ship_name is None:
                container.load(mass)
                return
            ship = self.get_ship(ship_name)
            with self._ship_locks[ship_name]:
                prospective = kg_to_tonnes(ship.total_mass_kg() + mass)
                if prospective > ship.max_weight:
                    raise CapacityError(
                        ship_name,
                        f"Loading {mass:g} kg into {serial_number} would exceed the "
                        f"maximum weight of ship {ship_name}",
                    )
                container.load(mass)

    def unload(self, serial_number: str):
        container = self.get_container(serial_number)
        with self._container_locks[serial_number]:
            container.unload()

    # ------------------------------------------------------------------

    def _location_locked(self, serial_number: str) -> str | None:
        with self._lock:
            return self._location.get(serial_number)

    def _set_location(self, serial_number: str, ship_name: str | None):
        with self._lock:
            if ship_name is None:
                self._location.pop(serial_number, None)
            else:
                self._location[serial_number] = ship_name
