"""Tests for building containers from dict specs."""

import pytest

from cargo_fleet.config.constants import DEMO_CONTAINERS
from cargo_fleet.models import (
    BasicContainer,
    ContainerKind,
    GasContainer,
    LiquidContainer,
    ReeferContainer,
    build_container,
)
from cargo_fleet.services.alerts import AlertFeed


class TestBuildContainer:
    def test_demo_containers(self):
        expected = {
            "KON-C-1": LiquidContainer,
            "KON-C-2": LiquidContainer,
            "KON-C-3": GasContainer,
            "KON-C-4": ReeferContainer,
        }
        for serial, spec in DEMO_CONTAINERS.items():
            container = build_container(serial, spec, alerts=AlertFeed())
            assert isinstance(container, expected[serial])
            assert container.serial_number == serial

    def test_default_kind_is_basic(self):
        container = build_container("B", {
            "container_weight": 1, "max_load_weight": 2, "height": 3, "depth": 4,
        })
        assert isinstance(container, BasicContainer)

    def test_kind_case_insensitive(self):
        container = build_container("G", {
            "kind": "gas", "container_weight": 1, "max_load_weight": 2,
            "height": 3, "depth": 4, "pressure": 1.5,
        })
        assert isinstance(container, GasContainer)
        assert container.pressure == 1.5

    def test_kind_as_enum_member(self):
        container = build_container("G", {
            "kind": ContainerKind.GAS, "container_weight": 1, "max_load_weight": 2,
            "height": 3, "depth": 4, "pressure": 1.5,
        })
        assert isinstance(container, GasContainer)
        assert container.kind is ContainerKind.GAS

    def test_every_kind_member_accepted(self):
        specs = {
            ContainerKind.BASIC: {},
            ContainerKind.LIQUID: {"dangerous_cargo": True},
            ContainerKind.GAS: {"pressure": 1.0},
            ContainerKind.REEFER: {"product_type": "Fish", "required_temp": 2.0, "current_temp": 3.0},
        }
        common = {"container_weight": 1, "max_load_weight": 2, "height": 3, "depth": 4}
        for kind, extra in specs.items():
            container = build_container(kind.value, {"kind": kind, **common, **extra})
            assert container.kind is kind

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="Unknown container kind"):
            build_container("X", {"kind": "SOLID"})

    def test_missing_fields(self):
        with pytest.raises(ValueError, match="dangerous_cargo"):
            build_container("L", {
                "kind": "LIQUID", "container_weight": 1, "max_load_weight": 2,
                "height": 3, "depth": 4,
            })

    def test_alerts_passed_through(self):
        feed = AlertFeed()
        container = build_container("L", {**DEMO_CONTAINERS["KON-C-2"]}, alerts=feed)
        assert container.alerts is feed
