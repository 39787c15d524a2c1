"""Tests for the reefer container temperature guard."""

import pytest

from cargo_fleet.models.errors import OverfillError, UnknownProductError
from cargo_fleet.models.hazard import supports_hazard_alerts
from cargo_fleet.models.reefer_container import ReeferContainer
from cargo_fleet.services.alerts import WARNING, AlertFeed


class TestReeferContainer:
    def setup_method(self):
        self.alerts = AlertFeed()
        self.reefer = ReeferContainer(
            "KON-R-1", 1500, 3000, 200, 120,
            product_type="Bananas", required_temp=13.3, current_temp=15.0,
            alerts=self.alerts,
        )

    def test_fields(self):
        assert self.reefer.product_type == "Bananas"
        assert self.reefer.required_temp == 13.3
        assert self.reefer.current_container_temp == 15.0

    def test_no_hazard_capability(self):
        assert not supports_hazard_alerts(self.reefer)

    def test_warmer_temperature_applied(self):
        assert self.reefer.set_current_container_temp(18.0) is True
        assert self.reefer.current_container_temp == 18.0

    def test_required_temperature_applied(self):
        assert self.reefer.set_current_container_temp(13.3) is True
        assert self.reefer.current_container_temp == 13.3

    def test_colder_temperature_soft_rejected(self):
        assert self.reefer.set_current_container_temp(10.0) is False
        assert self.reefer.current_container_temp == 15.0

    def test_soft_reject_publishes_warning(self):
        self.reefer.set_current_container_temp(10.0)
        warnings = self.alerts.alerts(level=WARNING)
        assert len(warnings) == 1
        assert warnings[0].source == "KON-R-1"
        assert "13.3" in warnings[0].message

    def test_base_load_rules(self):
        self.reefer.load(3000)
        with pytest.raises(OverfillError):
            self.reefer.load(1)
        self.reefer.unload()
        assert self.reefer.current_load == 0

    def test_describe(self):
        text = self.reefer.describe()
        assert "Product: Bananas" in text
        assert "Required temp: 13.3°C" in text
        assert "Current temp: 15°C" in text


class TestFromProduct:
    def test_known_product(self):
        reefer = ReeferContainer.from_product("KON-R-2", 1500, 3000, 200, 120, "Fish",
                                              alerts=AlertFeed())
        assert reefer.required_temp == 2.0
        assert reefer.current_container_temp == 2.0

    def test_explicit_current_temp(self):
        reefer = ReeferContainer.from_product("KON-R-3", 1500, 3000, 200, 120, "Meat",
                                              current_temp=-10.0, alerts=AlertFeed())
        assert reefer.required_temp == -15.0
        assert reefer.current_container_temp == -10.0

    def test_unknown_product(self):
        with pytest.raises(UnknownProductError, match="Unknown product"):
            ReeferContainer.from_product("KON-R-4", 1500, 3000, 200, 120, "Kryptonite")
