"""
Container factory - builds any variant from a plain dict spec
"""

from cargo_fleet.models.container import BasicContainer, Container, ContainerKind
from cargo_fleet.models.gas_container import GasContainer
from cargo_fleet.models.liquid_container import LiquidContainer
from cargo_fleet.models.reefer_container import ReeferContainer

_COMMON_FIELDS = ("container_weight", "max_load_weight", "height", "depth")

_VARIANT_FIELDS = {
    ContainerKind.BASIC: (),
    ContainerKind.LIQUID: ("dangerous_cargo",),
    ContainerKind.GAS: ("pressure",),
    ContainerKind.REEFER: ("product_type", "required_temp", "current_temp"),
}

_VARIANT_CLASSES = {
    ContainerKind.BASIC: BasicContainer,
    ContainerKind.LIQUID: LiquidContainer,
    ContainerKind.GAS: GasContainer,
    ContainerKind.REEFER: ReeferContainer,
}


def build_container(serial_number: str, spec: dict, alerts=None) -> Container:
    """
    Create a container from a dict such as those in DEMO_CONTAINERS.

    Args:
        serial_number: identity of the new container
        spec: {"kind": "LIQUID" or ContainerKind.LIQUID, "container_weight": ..., ...};
            extra keys are ignored
        alerts: AlertFeed to publish on (default: the global feed)

    Raises:
        ValueError: unknown kind or a required field is missing
    """
    raw_kind = spec.get("kind", ContainerKind.BASIC)
    if isinstance(raw_kind, ContainerKind):
        kind = raw_kind
    else:
        try:
            kind = ContainerKind(str(raw_kind).upper())
        except ValueError:
            raise ValueError(f"Unknown container kind: {raw_kind}") from None

    fields = _COMMON_FIELDS + _VARIANT_FIELDS[kind]
    missing = [f for f in fields if f not in spec]
    if missing:
        raise ValueError(f"Missing fields for {kind.value} container: {', '.join(missing)}")

    kwargs = {f: spec[f] for f in fields}
    return _VARIANT_CLASSES[kind](serial_number, alerts=alerts, **kwargs)
