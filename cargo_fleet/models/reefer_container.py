"""
Refrigerated (reefer) container - guards its temperature setting
"""

from __future__ import annotations

from cargo_fleet.config.constants import PRODUCT_TEMPERATURES
from cargo_fleet.models.container import Container, ContainerKind
from cargo_fleet.models.errors import UnknownProductError
from cargo_fleet.services.alerts import WARNING


class ReeferContainer(Container):
    """
    Container that keeps a product at or above its required temperature.

    Requests to go colder than required are ignored with a warning rather
    than raised as an error.
    """

    kind = ContainerKind.REEFER

    def __init__(
        self,
        serial_number,
        container_weight,
        max_load_weight,
        height,
        depth,
        product_type: str,
        required_temp: float,
        current_temp: float,
        alerts=None,
    ):
        super().__init__(serial_number, container_weight, max_load_weight, height, depth, alerts)
        self._product_type = product_type
        self._required_temp = float(required_temp)
        self._current_container_temp = float(current_temp)

    @classmethod
    def from_product(
        cls,
        serial_number,
        container_weight,
        max_load_weight,
        height,
        depth,
        product_type: str,
        current_temp: float | None = None,
        alerts=None,
    ) -> ReeferContainer:
        """
        Build a reefer for a known product, taking its required temperature
        from PRODUCT_TEMPERATURES.

        Args:
            current_temp: starting temperature (default: the required one)

        Raises:
            UnknownProductError: product_type is not in the table
        """
        if product_type not in PRODUCT_TEMPERATURES:
            raise UnknownProductError(
                f"Unknown product: {product_type}. Known: {', '.join(PRODUCT_TEMPERATURES)}"
            )
        required = PRODUCT_TEMPERATURES[product_type]
        return cls(
            serial_number, container_weight, max_load_weight, height, depth,
            product_type=product_type,
            required_temp=required,
            current_temp=required if current_temp is None else current_temp,
            alerts=alerts,
        )

    @property
    def product_type(self) -> str:
        return self._product_type

    @property
    def required_temp(self) -> float:
        return self._required_temp

    @property
    def current_container_temp(self) -> float:
        return self._current_container_temp

    def set_current_container_temp(self, temp: float) -> bool:
        """
        Change the container temperature.

        Returns:
            True if applied, False if temp is below the required temperature
            (a warning is published and the temperature is left as is)
        """
        if temp < self._required_temp:
            self.alerts.publish(
                WARNING,
                self.serial_number,
                f"Attempt to set temperature {temp:g}°C below the required "
                f"{self._required_temp:g}°C. Ignoring.",
            )
            return False
        self._current_container_temp = float(temp)
        return True

    def describe(self) -> str:
        return (
            f"{super().describe()} "
            f"[Product: {self._product_type}, Required temp: {self._required_temp:g}°C, "
            f"Current temp: {self._current_container_temp:g}°C]"
        )

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "product_type": self._product_type,
            "required_temp_c": self._required_temp,
            "current_temp_c": self._current_container_temp,
        }
