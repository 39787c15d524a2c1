"""
Gas container - keeps a residue of its cargo when drained
"""

from cargo_fleet.config.constants import GAS_FILL_RATIO, GAS_RESIDUE_RATIO
from cargo_fleet.models.container import Container, ContainerKind
from cargo_fleet.models.errors import OverfillError
from cargo_fleet.models.hazard import HazardNotifier
from cargo_fleet.services.alerts import ERROR
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)


class GasContainer(HazardNotifier, Container):
    """
    Container for pressurised gas.

    Loading past the rated capacity raises a hazard alert before the load
    is refused. Unloading leaves GAS_RESIDUE_RATIO of the cargo inside.
    """

    kind = ContainerKind.GAS

    def __init__(
        self,
        serial_number,
        container_weight,
        max_load_weight,
        height,
        depth,
        pressure: float,
        alerts=None,
    ):
        super().__init__(serial_number, container_weight, max_load_weight, height, depth, alerts)
        self._pressure = float(pressure)

    @property
    def pressure(self) -> float:
        return self._pressure

    def set_pressure(self, value: float):
        """Record a new pressure reading (atm)."""
        self._pressure = float(value)

    @property
    def load_ceiling(self) -> float:
        return self.max_load_weight * GAS_FILL_RATIO

    def load(self, mass: float):
        self._check_mass(mass)
        if self.current_load + mass > self.load_ceiling:
            self.notify_hazard(
                f"Permitted load exceeded in gas container {self.serial_number}"
            )
            raise OverfillError(
                self.serial_number,
                f"Attempt to overfill gas container {self.serial_number}",
            )
        super().load(mass)

    def unload(self):
        """
        Drain the container, leaving the residue behind.

        Never raises: if the residue cannot be put back the failure goes to
        the alert feed and the container stays empty.
        """
        remainder = self.current_load * GAS_RESIDUE_RATIO
        super().unload()
        try:
            Container.load(self, remainder)
        except OverfillError as e:
            self.alerts.publish(ERROR, self.serial_number, str(e))
        logger.debug("Gas container %s drained, residue %s kg", self.serial_number, self.current_load)

    def describe(self) -> str:
        return f"{super().describe()} [Pressure: {self._pressure:g} atm]"

    def to_dict(self) -> dict:
        return {
            **super().to_dict(),
            "pressure_atm": self._pressure,
            "hazard_flag": self.hazard_flag,
        }
