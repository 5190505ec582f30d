"""Reconciler - Map a new frame onto the previously rendered one.

A frame is the list of visible nodes produced by the layout engine plus
the edges between them. Reconciliation compares it with the previous
frame by stable identity (a node's ``render_id``; an edge's child
``render_id``) and splits both into enter, update and exit partitions.
For each entity it also works out where its transition starts and
ends:

- enter: starts at the origin (the interaction source's previous
  position) and grows to the new position;
- update: moves from the previous position to the new one;
- exit: shrinks from where it was toward the source's new position,
  after which the element is removed.

Nothing here touches a drawing surface. The painter turns a plan into
surface calls.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Generic, Hashable, Iterator, Mapping, Sequence, TypeVar

from taxotree.tree.relations import Edge
from taxotree.tree.TreeNode import Position, TreeNode

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Phase(Enum):
    """Which partition an entity fell into."""

    ENTER = "enter"
    UPDATE = "update"
    EXIT = "exit"


@dataclass(frozen=True)
class Partition(Generic[T]):
    """Enter/update/exit split of one entity type.

    Entering and updating items keep the order of the new frame;
    exiting items keep the order of the previous frame.
    """

    enter: list[T] = field(default_factory=list)
    update: list[T] = field(default_factory=list)
    exit: list[T] = field(default_factory=list)

    def __iter__(self) -> Iterator[T]:
        yield from self.enter
        yield from self.update
        yield from self.exit

    def __len__(self) -> int:
        return len(self.enter) + len(self.update) + len(self.exit)


def partition(
    previous: Mapping[Hashable, T],
    current: Sequence[T],
    key: Callable[[T], Hashable],
) -> Partition[T]:
    """Split entities by identity against the previous frame.

    Args:
        previous: Previous frame keyed by identity.
        current: New frame in display order.
        key: Identity of an entity in ``current``.

    Returns:
        Partition where every entity of either frame appears exactly once.
    """
    enter: list[T] = []
    update: list[T] = []
    seen: set[Hashable] = set()
    for item in current:
        k = key(item)
        if k in seen:
            raise ValueError(f"Duplicate identity in frame: {k!r}")
        seen.add(k)
        if k in previous:
            update.append(item)
        else:
            enter.append(item)
    exit_ = [item for k, item in previous.items() if k not in seen]
    return Partition(enter=enter, update=update, exit=exit_)


@dataclass(frozen=True)
class NodeTransition:
    """Animated move of one node element."""

    node: TreeNode
    render_id: int
    phase: Phase
    start: Position
    end: Position


@dataclass(frozen=True)
class EdgeTransition:
    """Animated move of one link element, described by its endpoints."""

    edge: Edge
    render_id: int
    phase: Phase
    start_source: Position
    start_target: Position
    end_source: Position
    end_target: Position


@dataclass
class ReconcilePlan:
    """Result of one reconciliation pass.

    Attributes:
        nodes: Node transitions by phase.
        edges: Edge transitions by phase.
        source: Node whose interaction triggered the pass, if any.
        origin: Where entering elements start.
        exit_target: Where exiting elements go.
        pass_number: 1 for a session's first pass.
    """

    nodes: Partition[NodeTransition]
    edges: Partition[EdgeTransition]
    source: TreeNode | None = None
    origin: Position | None = None
    exit_target: Position | None = None
    pass_number: int = 0

    def summary(self) -> dict[str, int]:
        """Counts per partition, handy for logs and status endpoints."""
        return {
            "nodes_enter": len(self.nodes.enter),
            "nodes_update": len(self.nodes.update),
            "nodes_exit": len(self.nodes.exit),
            "edges_enter": len(self.edges.enter),
            "edges_update": len(self.edges.update),
            "edges_exit": len(self.edges.exit),
        }


class RenderSession:
    """State carried between reconciliation passes.

    Holds the ``render_id`` counter and the previous frame's node and
    edge indexes. One session corresponds to one rendered view; call
    close() to tear it down and release the ids it handed out.
    """

    def __init__(self) -> None:
        self._next_id = 0
        self._assigned: list[TreeNode] = []
        self.nodes: dict[int, TreeNode] = {}
        self.edges: dict[int, Edge] = {}
        self.pass_count = 0

    def assign_render_id(self, node: TreeNode) -> int:
        """Give ``node`` the next id unless it already has one."""
        if node.render_id is None:
            self._next_id += 1
            node.render_id = self._next_id
            self._assigned.append(node)
        return node.render_id

    @property
    def last_render_id(self) -> int:
        """Highest id handed out so far (0 before any)."""
        return self._next_id

    def node(self, render_id: int) -> TreeNode | None:
        """Return the node with ``render_id`` in the current frame."""
        return self.nodes.get(render_id)

    def close(self) -> None:
        """Forget the frame and clear render state on every node seen."""
        for node in self._assigned:
            node.render_id = None
            node.position = None
            node.previous_position = None
        self._assigned.clear()
        self.nodes.clear()
        self.edges.clear()
        self._next_id = 0
        self.pass_count = 0


def _last_position(node: TreeNode) -> Position:
    """Where a node was drawn at the end of the previous pass."""
    position = node.previous_position or node.position
    if position is None:
        raise ValueError(f"Node {node.name!r} has never been laid out")
    return position


def _new_position(node: TreeNode) -> Position:
    if node.position is None:
        raise ValueError(f"Node {node.name!r} has no layout position")
    return node.position


def interaction_origin(source: TreeNode | None) -> Position | None:
    """Start point for entering elements: the source's previous position."""
    if source is None:
        return None
    return source.previous_position or source.position


def reconcile(
    session: RenderSession,
    nodes: Sequence[TreeNode],
    edges: Sequence[Edge],
    source: TreeNode | None = None,
) -> ReconcilePlan:
    """Reconcile a freshly laid-out frame against the session's last frame.

    Args:
        session: Render session carrying ids and the previous frame.
        nodes: Visible nodes with positions set, in display order.
        edges: Visible edges between those nodes.
        source: Node whose interaction triggered this pass. With no
            source, entering elements start at their own position.

    Returns:
        ReconcilePlan describing every transition.

    Raises:
        ValueError: If a node in ``nodes`` has no position.
    """
    for node in nodes:
        session.assign_render_id(node)
    for edge in edges:
        session.assign_render_id(edge.target)

    origin = interaction_origin(source)
    exit_target = source.position if source is not None else None

    node_part = partition(session.nodes, nodes, key=lambda n: n.render_id)
    edge_part = partition(session.edges, edges, key=lambda e: e.key)

    node_plan: Partition[NodeTransition] = Partition(
        enter=[
            NodeTransition(n, n.render_id, Phase.ENTER, origin or _new_position(n), _new_position(n))
            for n in node_part.enter
        ],
        update=[
            NodeTransition(n, n.render_id, Phase.UPDATE, _last_position(n), _new_position(n))
            for n in node_part.update
        ],
        exit=[
            NodeTransition(
                n, n.render_id, Phase.EXIT, _last_position(n), exit_target or _last_position(n)
            )
            for n in node_part.exit
        ],
    )

    def _enter_edge(e: Edge) -> EdgeTransition:
        start = origin or _new_position(e.target)
        return EdgeTransition(
            e, e.key, Phase.ENTER, start, start, _new_position(e.source), _new_position(e.target)
        )

    def _update_edge(e: Edge) -> EdgeTransition:
        return EdgeTransition(
            e,
            e.key,
            Phase.UPDATE,
            _last_position(e.source),
            _last_position(e.target),
            _new_position(e.source),
            _new_position(e.target),
        )

    def _exit_edge(e: Edge) -> EdgeTransition:
        end = exit_target or _last_position(e.target)
        return EdgeTransition(
            e, e.key, Phase.EXIT, _last_position(e.source), _last_position(e.target), end, end
        )

    edge_plan: Partition[EdgeTransition] = Partition(
        enter=[_enter_edge(e) for e in edge_part.enter],
        update=[_update_edge(e) for e in edge_part.update],
        exit=[_exit_edge(e) for e in edge_part.exit],
    )

    # Baseline for the next pass
    for node in nodes:
        node.previous_position = node.position
    session.nodes = {n.render_id: n for n in nodes}
    session.edges = {e.key: e for e in edges}
    session.pass_count += 1

    plan = ReconcilePlan(
        nodes=node_plan,
        edges=edge_plan,
        source=source,
        origin=origin,
        exit_target=exit_target,
        pass_number=session.pass_count,
    )
    logger.debug("Reconcile pass %d: %s", plan.pass_number, plan.summary())
    return plan
