"""Graph package for the message dispatcher."""

from .builder import ENTRY_NODE, ROUTE_NODES, build_dispatch_graph
from .nodes import classify_message
from .state import DispatchState, Route

__all__ = [
    "ENTRY_NODE",
    "ROUTE_NODES",
    "DispatchState",
    "Route",
    "build_dispatch_graph",
    "classify_message",
]
