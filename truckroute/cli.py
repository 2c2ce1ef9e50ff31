"""Command that prints the delivery map with the blue route drawn on it."""

from __future__ import annotations

import argparse
from typing import Sequence

from truckroute.mapping import add_route, blue_route, populate_map, print_map


def main(argv: Sequence[str] | None = None) -> int:
    """Print the map overlaid with the blue truck route."""
    parser = argparse.ArgumentParser(
        prog="truckroute",
        description="Print the delivery map with the blue truck route.",
    )
    parser.parse_args(argv)

    route_map = add_route(populate_map(), blue_route())
    print_map(route_map, True, True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())