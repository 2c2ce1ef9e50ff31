import pytest

from truckroute.delivery import (
    MAX_VOLUME,
    MAX_WEIGHT,
    Shipment,
    Truck,
    can_fit_shipment,
    remaining_capacity_kg,
    remaining_volume_m3,
)
from truckroute.mapping import Point


def test_remaining_capacity_kg():
    truck = Truck()
    truck.current_weight = 3000
    assert remaining_capacity_kg(truck) == 2000

    truck.current_weight = 5200
    assert remaining_capacity_kg(truck) == 0

    truck.current_weight = 0
    assert remaining_capacity_kg(truck) == 5000

    assert remaining_capacity_kg(None) == 0


def test_remaining_capacity_exactly_full():
    truck = Truck(current_weight=MAX_WEIGHT)
    assert remaining_capacity_kg(truck) == 0


def test_remaining_volume_m3():
    truck = Truck()
    truck.current_volume = 100.0
    assert remaining_volume_m3(truck) == pytest.approx(100.0, abs=0.0001)

    truck.current_volume = 200.0
    assert remaining_volume_m3(truck) == pytest.approx(0.0, abs=0.0001)

    truck.current_volume = 210.0
    assert remaining_volume_m3(truck) == pytest.approx(0.0, abs=0.0001)

    assert remaining_volume_m3(None) == pytest.approx(0.0, abs=0.0001)


def test_remaining_volume_empty_truck():
    assert remaining_volume_m3(Truck()) == pytest.approx(MAX_VOLUME)


def test_can_fit_shipment():
    truck = Truck(current_weight=4000, current_volume=100.0)
    shipment = Shipment(500, 50.0, Point(5, 11))

    assert can_fit_shipment(truck, shipment) is True

    shipment.weight = 1500
    assert can_fit_shipment(truck, shipment) is False

    shipment.weight = 500
    shipment.volume = 120.0
    assert can_fit_shipment(truck, shipment) is False

    assert can_fit_shipment(None, shipment) is False
    assert can_fit_shipment(truck, None) is False


def test_can_fit_exact_remaining_limits():
    truck = Truck(current_weight=4000, current_volume=100.0)
    shipment = Shipment(1000, 100.0, Point(7, 5))
    assert can_fit_shipment(truck, shipment) is True


def test_truck_counts_cargo():
    truck = Truck()
    truck.cargo.append(Shipment(10, 0.5, Point(1, 1)))
    truck.cargo.append(Shipment(20, 2.0, Point(2, 2)))
    assert truck.num_shipments == 2