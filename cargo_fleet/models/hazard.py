"""
Hazard notification capability, mixed into the liquid and gas containers only.
"""

from cargo_fleet.services.alerts import HAZARD


class HazardNotifier:
    """
    Mixin for containers that raise hazard alerts.

    Expects the host class to provide `serial_number` and `alerts`.
    Once a hazard has been reported the flag stays set for the life of
    the container.
    """

    _hazard_flag = False

    @property
    def hazard_flag(self) -> bool:
        return self._hazard_flag

    def notify_hazard(self, message: str):
        """Flag the container and publish the message on the alert feed."""
        self._hazard_flag = True
        self.alerts.publish(HAZARD, self.serial_number, message)


def supports_hazard_alerts(container) -> bool:
    """True if the container can raise hazard notifications."""
    return isinstance(container, HazardNotifier)
