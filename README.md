# truckroute

This is a small toolkit for delivery planning on a 25 × 25 grid city map.

- **Map** (`truckroute.mapping.Map`): a grid of integer squares. A value of `1`
  marks a building. When a route is added, its value is added on top of the
  squares it covers.
- **Routes** (`Route`, `RouteSymbol`): the fixed blue, green and yellow truck
  routes. Each can be overlaid on the map.
- **Path finding** (`shortest_path`): a greedy walk from one square to another.
  It steps around buildings and always moves to the neighbouring square that is
  closest to the destination.
- **Trucks and shipments** (`truckroute.delivery`): each truck is limited to
  5000 kg and 200 m³. You can check how much capacity is left and whether a
  shipment still fits.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

## Command line

```
truckroute
```

This prints the city map with the blue route drawn on it. Row numbers start at
1 and columns are labelled `A` to `Y`. The only option is `--help`.

The map uses these symbols:

| Symbol | Meaning |
|--------|---------|
| (space) | open square |
| `X` | building |
| `B` / `G` / `Y` | blue / green / yellow route |
| `.` | blue and green overlap |
| `-` | blue and yellow overlap |
| `*` | green and yellow overlap |
| `+` | all three routes overlap |
| `P` | a diversion path (`RouteSymbol.DIVERSION`) |

Any square value with no symbol of its own is shown as `?`.

## Library use

```python
from truckroute.mapping import (
    Point, populate_map, add_route, blue_route, shortest_path, print_map,
)
from truckroute.delivery import (
    Truck, Shipment, remaining_capacity_kg, remaining_volume_m3, can_fit_shipment,
)

city = populate_map()
print_map(add_route(city, blue_route()), True, True)
text = city.render(base1=False, alpha_cols=False)  # the same layout, returned as a string

path = shortest_path(city, Point(0, 0), Point(3, 5))
print([(p.row, p.col) for p in path])
# [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (3, 5)]

truck = Truck(current_weight=4000, current_volume=100.0)
print(remaining_capacity_kg(truck))   # 1000
print(remaining_volume_m3(truck))     # 100.0
print(can_fit_shipment(truck, Shipment(500, 50.0, Point(5, 11))))  # True
```

### Mapping

- `populate_map()` returns the city with its buildings marked.
- `blue_route()`, `green_route()` and `yellow_route()` return the fixed routes.
- `add_route(grid, route)` returns a copy of the map with the route added. The
  original map is left unchanged.
- `Route.add_point(row, col)` appends a point to a route.
  `Route.add_point_unless(row, col, not_this)` appends the point only if it is
  not equal to `not_this`. A route holds at most 100 points. Going past that
  limit raises `RouteFullError`, which is a subclass of `ValueError`.
- `distance(p1, p2)` returns the Euclidean distance between two points.
- `possible_moves(grid, point, backpath)` returns the neighbouring squares that
  lie on the map, are not buildings, and are not `backpath`.
- `closest_point(route, point)` returns the index of the route point nearest to
  `point`. If there is a tie, the first one wins. If the route is empty, it
  returns `None`.
- `shortest_path(grid, start, dest)` returns the squares visited, without
  `start`:
  - If `start` equals `dest`, the route is empty.
  - If the walk reaches a square with no move left, it stops there. The route
    then holds the steps taken so far.
  - If the walk would grow beyond 100 points, it raises `RouteFullError`.

### Delivery

- `remaining_capacity_kg(truck)` returns the whole kilograms still free.
- `remaining_volume_m3(truck)` returns the cubic metres still free.
- Both return `0` when the truck is full or over its limit, or when `truck` is
  `None`.
- `can_fit_shipment(truck, shipment)` is `True` only when the shipment's weight
  and volume are both within what remains. It is `False` if either argument is
  `None`.
- `ShipmentInput` and `DeliveryResult` are plain data holders.

## What it does not do

The package does not:

- choose a truck for a shipment;
- load cargo onto a truck or update a truck's weight and volume;
- parse or validate user input such as a destination like `"12L"`.

`ShipmentInput.is_valid` and the fields of `DeliveryResult` are only set by the
caller.

## Running the tests

```
pip install ".[test]"
pytest
```