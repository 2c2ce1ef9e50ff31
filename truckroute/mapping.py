"""Grid map of the delivery area, truck routes and greedy path finding."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator

MAP_ROWS = 25
MAP_COLS = 25
MAX_ROUTE = 100

BUILDING = 1

# Index into this string is the value of a map square.
_SYMBOLS = " XB?G?.?Y?-?*?+?P"

_LAYOUT = (
    "0000110000000000000000000",
    "0110110110000000110011000",
    "0110110110101100110011000",
    "0000000000000000000000000",
    "0000000000000000000000000",
    "0000000000000000000000000",
    "1100110110000001011000000",
    "1100110100111001001000111",
    "0000000100111001001000111",
    "0000000000000000000000000",
    "0000000000000000000000000",
    "1011100000011111101110111",
    "1000001111011111101110111",
    "1011101111011111101110111",
    "1011100000011111101110111",
    "1000001110011111101110111",
    "0000001110000000000000000",
    "0000001110000000000000000",
    "0000001110000111111111111",
    "0000000000000000000000000",
    "0000000000000000000000000",
    "0111111100110110111100000",
    "0111111100110110111101111",
    "0111111100110110000001111",
    "0111111100110110000000000",
)

# Neighbour offsets in the order moves are considered.
_NEIGHBOURS = (
    (-1, 0), (-1, -1), (-1, 1),
    (0, -1), (0, 1),
    (1, 0), (1, -1), (1, 1),
)


class RouteFullError(ValueError):
    """Raised when a route would grow beyond MAX_ROUTE points."""


class RouteSymbol(IntEnum):
    """Value a route adds to each map square it passes through."""

    BLUE = 2
    GREEN = 4
    YELLOW = 8
    DIVERSION = 16


@dataclass(frozen=True)
class Point:
    """Row/column position of a square on a map."""

    row: int
    col: int


@dataclass
class Route:
    """An ordered path of adjacent points."""

    points: list[Point] = field(default_factory=list)
    symbol: RouteSymbol = RouteSymbol.DIVERSION

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def _append(self, point: Point) -> None:
        if len(self.points) >= MAX_ROUTE:
            raise RouteFullError(f"route cannot hold more than {MAX_ROUTE} points")
        self.points.append(point)

    def add_point(self, row: int, col: int) -> None:
        """Append the point (row, col) to the route."""
        self._append(Point(row, col))

    def add_point_unless(self, row: int, col: int, not_this: Point | None) -> None:
        """Append (row, col) unless it equals ``not_this``."""
        point = Point(row, col)
        if point != not_this:
            self._append(point)


@dataclass
class Map:
    """A raster of squares; 1 marks a building, route symbols are added on top."""

    squares: list[list[int]]

    @property
    def num_rows(self) -> int:
        return len(self.squares)

    @property
    def num_cols(self) -> int:
        return len(self.squares[0]) if self.squares else 0

    def __getitem__(self, point: Point) -> int:
        return self.squares[point.row][point.col]

    def contains(self, row: int, col: int) -> bool:
        """Whether (row, col) lies inside the map."""
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def render(self, base1: bool = True, alpha_cols: bool = True) -> str:
        """Return the map as text with a column header and numbered rows."""
        if alpha_cols:
            header = "".join(chr(ord("A") + c) for c in range(self.num_cols))
        else:
            header = "".join(str(c % 10) for c in range(self.num_cols))
        offset = 1 if base1 else 0
        lines = [" " * 4 + header, " " * 4 + "-" * self.num_cols]
        for index, row in enumerate(self.squares):
            cells = "".join(
                _SYMBOLS[value] if 0 <= value < len(_SYMBOLS) else "?" for value in row
            )
            lines.append(f"{index + offset:3d}|{cells}")
        return "\n".join(lines) + "\n"


def populate_map() -> Map:
    """Return the delivery area with all buildings marked."""
    return Map([[int(ch) for ch in line] for line in _LAYOUT])


def add_route(grid: Map, route: Route) -> Map:
    """Return a copy of ``grid`` with the route's symbol added on each of its points."""
    result = Map([list(row) for row in grid.squares])
    for point in route:
        result.squares[point.row][point.col] += int(route.symbol)
    return result


def print_map(grid: Map, base1: bool = True, alpha_cols: bool = True) -> None:
    """Print the rendered map to standard output."""
    print(grid.render(base1, alpha_cols), end="")


def _path(symbol: RouteSymbol, *waypoints: tuple[int, int]) -> Route:
    """Build a route of straight segments joining the waypoints."""
    route = Route(symbol=symbol)
    first_row, first_col = waypoints[0]
    route.add_point(first_row, first_col)
    row, col = first_row, first_col
    for target_row, target_col in waypoints[1:]:
        step_row = (target_row > row) - (target_row < row)
        step_col = (target_col > col) - (target_col < col)
        while (row, col) != (target_row, target_col):
            row += step_row
            col += step_col
            route.add_point(row, col)
    return route


def blue_route() -> Route:
    """Return the fixed route of the blue trucks."""
    return _path(
        RouteSymbol.BLUE,
        (0, 0), (4, 0), (4, 9), (10, 9), (10, 10), (17, 10), (17, 24),
    )


def green_route() -> Route:
    """Return the fixed route of the green trucks."""
    return _path(
        RouteSymbol.GREEN,
        (0, 0), (4, 0), (4, 11), (0, 11), (0, 19), (9, 19), (9, 24),
    )


def yellow_route() -> Route:
    """Return the fixed route of the yellow trucks."""
    return _path(
        RouteSymbol.YELLOW,
        (0, 0), (4, 0), (4, 3), (9, 3), (9, 1), (19, 1), (19, 24),
    )


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    delta_row = p2.row - p1.row
    delta_col = p2.col - p1.col
    return math.sqrt(delta_row * delta_row + delta_col * delta_col)


def possible_moves(grid: Map, point: Point, backpath: Point | None) -> Route:
    """Adjacent squares that are not buildings and are not ``backpath``."""
    result = Route(symbol=RouteSymbol.DIVERSION)
    for d_row, d_col in _NEIGHBOURS:
        row, col = point.row + d_row, point.col + d_col
        if grid.contains(row, col) and grid.squares[row][col] != BUILDING:
            result.add_point_unless(row, col, backpath)
    return result


def closest_point(route: Route, point: Point) -> int | None:
    """Index of the route point nearest to ``point``; the first wins ties. None if empty."""
    if not route.points:
        return None
    return min(range(len(route.points)), key=lambda i: distance(point, route.points[i]))


def shortest_path(grid: Map, start: Point, dest: Point) -> Route:
    """Greedily walk from ``start`` towards ``dest`` avoiding buildings.

    The returned route excludes ``start``. It is empty when start equals dest,
    and stops early when no move is possible. RouteFullError is raised if the
    walk grows beyond MAX_ROUTE points.
    """
    result = Route(symbol=RouteSymbol.DIVERSION)
    last: Point | None = None
    current = start
    while current != dest:
        moves = possible_moves(grid, current, last)
        index = closest_point(moves, dest)
        if index is None:
            break
        last = current
        current = moves.points[index]
        result._append(current)
    return result