"""
Liquid container - fill limit depends on whether the cargo is dangerous
"""

from cargo_fleet.config.constants import LIQUID_DANGEROUS_FILL_RATIO, LIQUID_ORDINARY_FILL_RATIO
from cargo_fleet.models.container import Container, ContainerKind
from cargo_fleet.models.errors import OverfillError
from cargo_fleet.models.hazard import HazardNotifier


class LiquidContainer(HazardNotifier, Container):
    """
    Container for liquid cargo.

    Dangerous cargo may fill at most half of the rated capacity, ordinary
    cargo at most 90%. A breach raises a hazard alert before the load is
    refused.
    """

    kind = ContainerKind.LIQUID

    def __init__(
        self,
        serial_number,
        container_weight,
        max_load_weight,
        height,
        depth,
        dangerous_cargo: bool,
        alerts=None,
    ):
        super().__init__(serial_number, container_weight, max_load_weight, height, depth, alerts)
        self._dangerous_cargo = bool(dangerous_cargo)

    @property
    def dangerous_cargo(self) -> bool:
        return self._dangerous_cargo

    @property
    def load_ceiling(self) -> float:
        ratio = LIQUID_DANGEROUS_FILL_RATIO if self._dangerous_cargo else LIQUID_ORDINARY_FILL_RATIO
        return self.max_load_weight * ratio

    def load(self, mass: float):
        self._check_mass(mass)
        if self.current_load + mass > self.load_ceiling:
            self.notify_hazard(
                f"Attempt to exceed the safety limit of liquid container {self.serial_number}"
            )
            raise OverfillError(
                self.serial_number,
                f"Dangerous overfill of liquid container {self.serial_number}",
            )
        super().load(mass)

    def describe(self) -> str:
        tag = "[DANGEROUS cargo]" if self._dangerous_cargo else "[Ordinary cargo]"
        return f"{super().describe()} {tag}"

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "dangerous_cargo": self._dangerous_cargo,
            "hazard_flag": self.hazard_flag,
        }
