"""Trucks, shipments and the capacity checks used when loading them."""

from __future__ import annotations

from dataclasses import dataclass, field

from truckroute.mapping import Point, Route

MAX_SHIPMENTS = 50
MAX_WEIGHT = 5000  # kilograms
MAX_VOLUME = 200  # cubic metres
NUM_TRUCKS = 3


@dataclass
class Shipment:
    """A package to be delivered."""

    weight: float
    volume: float
    destination: Point


@dataclass
class Truck:
    """A delivery truck, the route it follows and the cargo it carries."""

    route: Route = field(default_factory=Route)
    cargo: list[Shipment] = field(default_factory=list)
    current_weight: float = 0.0
    current_volume: float = 0.0
    truck_number: int = 0  # 0 = blue, 1 = green, 2 = yellow

    @property
    def num_shipments(self) -> int:
        return len(self.cargo)


@dataclass
class ShipmentInput:
    """Shipment details as entered by a user, before validation."""

    weight: float = 0.0
    box_size: float = 0.0
    destination: str = ""
    is_valid: bool = False


@dataclass
class DeliveryResult:
    """Outcome of trying to place a shipment on a truck."""

    success: bool = False
    truck_index: int = 0
    needs_diversion: bool = False
    distance_to_go: float = 0.0


def remaining_capacity_kg(truck: Truck | None) -> int:
    """Whole kilograms the truck can still take; 0 if none or no truck."""
    if truck is None or truck.current_weight >= MAX_WEIGHT:
        return 0
    return int(MAX_WEIGHT - truck.current_weight)


def remaining_volume_m3(truck: Truck | None) -> float:
    """Cubic metres still free in the truck; 0.0 if none or no truck."""
    if truck is None or truck.current_volume >= MAX_VOLUME:
        return 0.0
    return float(MAX_VOLUME - truck.current_volume)


def can_fit_shipment(truck: Truck | None, shipment: Shipment | None) -> bool:
    """Whether the shipment fits within the truck's remaining weight and volume."""
    if truck is None or shipment is None:
        return False
    if shipment.weight > remaining_capacity_kg(truck):
        return False
    if shipment.volume > remaining_volume_m3(truck):
        return False
    return True