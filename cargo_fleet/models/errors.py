"""
Error types raised by containers, ships and the fleet registry.
"""


class CargoFleetError(Exception):
    """Base class for every domain error in this package."""


class OverfillError(CargoFleetError):
    """A load would push a container past its ceiling."""

    def __init__(self, serial_number: str, message: str | None = None):
        self.serial_number = serial_number
        super().__init__(message or f"Maximum load exceeded for container {serial_number}")


class CapacityError(CargoFleetError):
    """Admitting a container would break a ship's count or mass limit."""

    def __init__(self, ship_name: str, message: str):
        self.ship_name = ship_name
        super().__init__(message)


class NotFoundError(CargoFleetError):
    """A serial number is not aboard the ship it was looked up on."""

    def __init__(self, ship_name: str, serial_number: str):
        self.ship_name = ship_name
        self.serial_number = serial_number
        super().__init__(f"Container {serial_number} is not aboard ship {ship_name}")


class DuplicateSerialError(CargoFleetError):
    """A container with this serial number is already registered."""

    def __init__(self, serial_number: str):
        self.serial_number = serial_number
        super().__init__(f"Container {serial_number} is already registered")


class AlreadyAboardError(CargoFleetError):
    """The container is aboard another ship and must be discharged first."""

    def __init__(self, serial_number: str, ship_name: str):
        self.serial_number = serial_number
        self.ship_name = ship_name
        super().__init__(f"Container {serial_number} is already aboard ship {ship_name}")


class UnknownShipError(CargoFleetError):
    """No ship with this name is registered."""

    def __init__(self, ship_name: str):
        self.ship_name = ship_name
        super().__init__(f"Unknown ship: {ship_name}")


class UnknownContainerError(CargoFleetError):
    """No container with this serial number is registered."""

    def __init__(self, serial_number: str):
        self.serial_number = serial_number
        super().__init__(f"Unknown container: {serial_number}")


class UnknownProductError(ValueError):
    """A reefer product with no known holding temperature."""
