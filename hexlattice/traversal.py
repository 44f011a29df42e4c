"""Depth-first traversal over any collection of nodes exposing ``neighbors``.

Only members of the input collection are visited: a ``neighbors`` entry that
does not equal a member is skipped, which keeps walks over the unbounded hex
lattice finite. Neighbor values are resolved to the member instance before
they are visited, so callbacks always see the caller's own objects.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Hashable,
    Iterable,
    Iterator,
    TypeAlias,
    TypeVar,
)

import networkx as nx

logger = logging.getLogger(__name__)


NodeT = TypeVar("NodeT", bound=Hashable)
Callback = Callable[[Any], object]

if TYPE_CHECKING:  # pragma: no cover - typing only
    HexGraph: TypeAlias = nx.Graph[Any]
else:  # pragma: no cover - runtime alias without subscripting
    HexGraph: TypeAlias = nx.Graph


class VisitState(IntEnum):
    NOT_VISITED = 0
    VISITED = 1
    FINISHED = 2


@dataclass
class DFSTimestamps(Generic[NodeT]):
    """Discovery/finish times and predecessors from one traversal of a forest."""

    discovery: dict[NodeT, int] = field(default_factory=dict)
    finished: dict[NodeT, int] = field(default_factory=dict)
    predecessors: dict[NodeT, NodeT | None] = field(default_factory=dict)


def _members(nodes: Iterable[NodeT]) -> dict[NodeT, NodeT]:
    members: dict[NodeT, NodeT] = {}
    for node in nodes:
        members.setdefault(node, node)
    return members


def _walk(
    root: NodeT,
    members: dict[NodeT, NodeT],
    state: dict[NodeT, VisitState],
    on_discover: Callable[[NodeT, NodeT | None], None],
    on_finish: Callable[[NodeT], None],
) -> None:
    # Explicit stack; visits in exactly the order the recursive form would.
    state[root] = VisitState.VISITED
    on_discover(root, None)
    stack: list[tuple[NodeT, Iterator[Any]]] = [(root, iter(root.neighbors))]  # type: ignore[attr-defined]
    while stack:
        node, pending = stack[-1]
        for candidate in pending:
            member = members.get(candidate)
            if member is None or state[member] is not VisitState.NOT_VISITED:
                continue
            state[member] = VisitState.VISITED
            on_discover(member, node)
            stack.append((member, iter(member.neighbors)))  # type: ignore[attr-defined]
            break
        else:
            stack.pop()
            state[node] = VisitState.FINISHED
            on_finish(node)


def depth_first_search(
    nodes: Iterable[NodeT], callback: Callback | None = None
) -> list[NodeT]:
    """Visit every node once, depth first, and return the discovery order.

    A new traversal root starts at each still-unvisited node while scanning
    ``nodes`` left to right.
    """

    members = _members(nodes)
    state = {node: VisitState.NOT_VISITED for node in members}
    order: list[NodeT] = []

    def discover(node: NodeT, _parent: NodeT | None) -> None:
        order.append(node)
        if callback is not None:
            callback(node)

    roots = 0
    for node in members:
        if state[node] is VisitState.NOT_VISITED:
            roots += 1
            _walk(node, members, state, discover, lambda _node: None)
    logger.debug("DFS visited %d nodes from %d roots", len(order), roots)
    return order


def timestamped_depth_first_search(
    nodes: Iterable[NodeT], callback: Callback | None = None
) -> DFSTimestamps[NodeT]:
    """Depth-first search recording discovery time, finish time and predecessor.

    One counter is shared across the whole forest, so every discovery and
    finish time is unique.
    """

    members = _members(nodes)
    state = {node: VisitState.NOT_VISITED for node in members}
    result: DFSTimestamps[NodeT] = DFSTimestamps(
        discovery={node: 0 for node in members},
        finished={node: 0 for node in members},
        predecessors={node: None for node in members},
    )
    time = 0

    def discover(node: NodeT, parent: NodeT | None) -> None:
        nonlocal time
        time += 1
        result.discovery[node] = time
        result.predecessors[node] = parent
        if callback is not None:
            callback(node)

    def finish(node: NodeT) -> None:
        nonlocal time
        time += 1
        result.finished[node] = time

    for node in members:
        if state[node] is VisitState.NOT_VISITED:
            _walk(node, members, state, discover, finish)
    return result


def adjacency_graph(nodes: Iterable[NodeT]) -> HexGraph:
    """Return an undirected graph with an edge per member-to-member neighbor pair."""

    members = _members(nodes)
    graph: HexGraph = nx.Graph()
    for node in members:
        graph.add_node(node)
    for node in members:
        for candidate in node.neighbors:  # type: ignore[attr-defined]
            member = members.get(candidate)
            if member is not None and member is not node:
                graph.add_edge(node, member)
    return graph
