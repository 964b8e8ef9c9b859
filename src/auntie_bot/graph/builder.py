"""LangGraph wiring for the message dispatcher."""

from __future__ import annotations

from datetime import tzinfo
from typing import Any, Callable

from langgraph.graph import END, START, StateGraph
from langgraph.graph.state import CompiledStateGraph

from auntie_bot import get_logger
from auntie_bot.graph.nodes import (
    give_tip,
    list_recent,
    prepare_message,
    record_expense,
    show_menu,
    summarize_period,
    undo_last,
)
from auntie_bot.graph.state import DispatchState, Route
from auntie_bot.ledger.store import LedgerStore
from auntie_bot.replies import ResponseSelector

LOGGER = get_logger("graph.builder")

ENTRY_NODE = "prepare_message"
MENU_NODE = "show_menu"
LIST_NODE = "list_recent"
UNDO_NODE = "undo_last"
SUMMARY_NODE = "summarize_period"
TIP_NODE = "give_tip"
RECORD_NODE = "record_expense"

# Route -> node; "unidentified" ends the run straight away.
ROUTE_NODES: dict[Route, str] = {
    "unidentified": END,
    "menu": MENU_NODE,
    "list": LIST_NODE,
    "undo": UNDO_NODE,
    "summary": SUMMARY_NODE,
    "tip": TIP_NODE,
    "record": RECORD_NODE,
}


def build_dispatch_graph(
    *,
    store: LedgerStore,
    selector: ResponseSelector,
    timezone: tzinfo,
) -> CompiledStateGraph[DispatchState, Any, Any, Any]:
    """Compile the classify-then-handle graph around the given collaborators."""

    builder = StateGraph(DispatchState)
    builder.add_node(ENTRY_NODE, _node(prepare_message, store=store, selector=selector))
    builder.add_node(MENU_NODE, _node(show_menu, selector=selector))
    builder.add_node(LIST_NODE, _node(list_recent, store=store, selector=selector))
    builder.add_node(UNDO_NODE, _node(undo_last, store=store, selector=selector))
    builder.add_node(
        SUMMARY_NODE,
        _node(summarize_period, store=store, selector=selector, timezone=timezone),
    )
    builder.add_node(TIP_NODE, _node(give_tip, selector=selector))
    builder.add_node(
        RECORD_NODE,
        _node(record_expense, store=store, selector=selector, timezone=timezone),
    )

    builder.add_edge(START, ENTRY_NODE)
    builder.add_conditional_edges(ENTRY_NODE, _route_from_entry, path_map=ROUTE_NODES)
    for node in (MENU_NODE, LIST_NODE, UNDO_NODE, SUMMARY_NODE, TIP_NODE, RECORD_NODE):
        builder.add_edge(node, END)

    graph = builder.compile()
    LOGGER.debug("Dispatch graph compiled with %d nodes", len(builder.nodes))
    return graph


def _node(
    handler: Callable[..., None], **dependencies: Any
) -> Callable[[DispatchState], DispatchState]:
    def _run(state: DispatchState) -> DispatchState:
        handler(state, **dependencies)
        return state

    _run.__name__ = handler.__name__
    return _run


def _route_from_entry(state: DispatchState) -> Route:
    return state.route or "record"


__all__ = ["ENTRY_NODE", "ROUTE_NODES", "build_dispatch_graph"]
