"""Grid city map, truck routes, greedy path finding and shipment capacity checks."""

__version__ = "0.1.0"
__all__ = ["mapping", "delivery", "cli"]