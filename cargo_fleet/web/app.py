"""
FastAPI web interface for the cargo fleet.

Run with:
    pip install fastapi uvicorn
    python -m uvicorn cargo_fleet.web.app:app --reload --port 8000
"""

from __future__ import annotations

from datetime import datetime

try:
    from fastapi import FastAPI, Query, Request
    from fastapi.responses import JSONResponse, PlainTextResponse
    from pydantic import BaseModel, Field
except ImportError:
    raise ImportError(
        "FastAPI is required for the web interface. "
        "Install with: pip install fastapi uvicorn"
    )

from cargo_fleet import __version__
from cargo_fleet.models.container import ContainerKind
from cargo_fleet.models.errors import (
    AlreadyAboardError,
    CapacityError,
    CargoFleetError,
    DuplicateSerialError,
    NotFoundError,
    OverfillError,
    UnknownContainerError,
    UnknownShipError,
)
from cargo_fleet.models.factory import build_container
from cargo_fleet.models.gas_container import GasContainer
from cargo_fleet.models.reefer_container import ReeferContainer
from cargo_fleet.models.ship import Ship
from cargo_fleet.services.alerts import alert_feed
from cargo_fleet.services.fleet_registry import FleetRegistry
from cargo_fleet.services.reporting import ship_summary
from cargo_fleet.utils.logger import get_logger

logger = get_logger(__name__)

app = FastAPI(
    title="Cargo Fleet",
    description="Container ships, container variants and their loading safety rules",
    version=__version__,
)

registry = FleetRegistry()

_ERROR_STATUS = {
    OverfillError: 409,
    CapacityError: 409,
    DuplicateSerialError: 409,
    AlreadyAboardError: 409,
    NotFoundError: 404,
    UnknownShipError: 404,
    UnknownContainerError: 404,
}


# ---------------------------------------------------------------------------
# Request bodies
# ---------------------------------------------------------------------------

class ShipIn(BaseModel):
    name: str
    speed: float = Field(ge=0)
    max_container_num: int = Field(ge=0)
    max_weight: float = Field(ge=0, description="tonnes")


class ContainerIn(BaseModel):
    serial_number: str
    kind: ContainerKind = ContainerKind.BASIC
    container_weight: float = Field(ge=0, description="kg")
    max_load_weight: float = Field(ge=0, description="kg")
    height: float = Field(description="cm")
    depth: float = Field(description="cm")
    dangerous_cargo: bool = False
    pressure: float = 1.0
    product_type: str | None = None
    required_temp: float | None = None
    current_temp: float | None = None


class MassIn(BaseModel):
    mass: float = Field(ge=0, description="kg")


class PressureIn(BaseModel):
    pressure: float


class TemperatureIn(BaseModel):
    temp: float


# ---------------------------------------------------------------------------
# Error handling
# ---------------------------------------------------------------------------

@app.exception_handler(CargoFleetError)
async def cargo_fleet_error_handler(request: Request, exc: CargoFleetError):
    status = _ERROR_STATUS.get(type(exc), 400)
    logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc)
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "message": str(exc)},
    )


@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    logger.warning("Invalid request on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"error": "ValueError", "message": str(exc)})


# ---------------------------------------------------------------------------
# Ships
# ---------------------------------------------------------------------------

@app.get("/api/ships")
def list_ships():
    """All registered ships with a utilisation summary."""
    return [ship_summary(s) for s in registry.ships]


@app.post("/api/ships", status_code=201)
def create_ship(body: ShipIn):
    ship = registry.register_ship(
        Ship(body.name, body.speed, body.max_container_num, body.max_weight)
    )
    return ship.to_dict()


@app.get("/api/ships/{name}")
def get_ship(name: str):
    return registry.get_ship(name).to_dict()


@app.get("/api/ships/{name}/report", response_class=PlainTextResponse)
def ship_report(name: str):
    """Human-readable ship report."""
    return registry.get_ship(name).report()


@app.post("/api/ships/{name}/containers/{serial}")
def board_container(name: str, serial: str):
    registry.board(name, serial)
    return registry.get_ship(name).to_dict()


@app.delete("/api/ships/{name}/containers/{serial}")
def discharge_container(name: str, serial: str):
    container = registry.discharge(name, serial)
    return container.to_dict()


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@app.get("/api/containers")
def list_containers():
    return [c.to_dict() for c in registry.containers]


@app.post("/api/containers", status_code=201)
def create_container(body: ContainerIn):
    """Reefers without required_temp take it from the product table."""
    if body.kind is ContainerKind.REEFER and body.required_temp is None:
        container = ReeferContainer.from_product(
            body.serial_number, body.container_weight, body.max_load_weight,
            body.height, body.depth,
            product_type=body.product_type or "",
            current_temp=body.current_temp,
        )
    else:
        spec = body.model_dump(exclude={"serial_number"}, exclude_none=True)
        spec["kind"] = body.kind.value
        container = build_container(body.serial_number, spec)
    registry.register_container(container)
    return container.to_dict()


@app.get("/api/containers/{serial}")
def get_container(serial: str):
    container = registry.get_container(serial)
    return {**container.to_dict(), "aboard": registry.location_of(serial)}


@app.post("/api/containers/{serial}/load")
def load_container(serial: str, body: MassIn):
    registry.load(serial, body.mass)
    return registry.get_container(serial).to_dict()


@app.post("/api/containers/{serial}/unload")
def unload_container(serial: str):
    registry.unload(serial)
    return registry.get_container(serial).to_dict()


@app.post("/api/containers/{serial}/pressure")
def set_pressure(serial: str, body: PressureIn):
    container = registry.get_container(serial)
    if not isinstance(container, GasContainer):
        return JSONResponse(
            status_code=400,
            content={"error": "ValueError", "message": f"{serial} is not a gas container"},
        )
    container.set_pressure(body.pressure)
    return container.to_dict()


@app.post("/api/containers/{serial}/temperature")
def set_temperature(serial: str, body: TemperatureIn):
    """Soft-rejected temperatures return applied=false, not an error."""
    container = registry.get_container(serial)
    if not isinstance(container, ReeferContainer):
        return JSONResponse(
            status_code=400,
            content={"error": "ValueError", "message": f"{serial} is not a reefer container"},
        )
    applied = container.set_current_container_temp(body.temp)
    return {**container.to_dict(), "applied": applied}


# ---------------------------------------------------------------------------
# Alerts and health
# ---------------------------------------------------------------------------

@app.get("/api/alerts")
def list_alerts(
    level: str | None = Query(None, description="HAZARD, WARNING or ERROR"),
    source: str | None = Query(None, description="Container serial number"),
):
    return [a.to_dict() for a in alert_feed.alerts(level=level, source=source)]


@app.get("/api/health")
def health_check():
    return {
        "status": "ok",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
        "ships_registered": len(registry.ships),
        "containers_registered": len(registry.containers),
        "alerts_recorded": alert_feed.size,
    }
