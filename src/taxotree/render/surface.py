"""Drawing surfaces.

The painter talks to a surface through the ``Surface`` protocol: create
a positioned group, draw a circle or text inside it, draw a cubic link
between two points, schedule a timed attribute transition, and remove
an element.

``SceneSurface`` is a retained in-memory scene that implements the
protocol. It advances transitions on an explicit clock, which makes it
usable both in tests and for static export after all transitions have
finished.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Protocol

from taxotree.tree.TreeNode import Position

GROUP = "group"
CIRCLE = "circle"
TEXT = "text"
PATH = "path"


class Surface(Protocol):
    """Primitive drawing operations consumed by the painter."""

    def create_group(self, element_id: str, position: Position, **attrs: Any) -> None: ...

    def draw_circle(
        self, element_id: str, parent_id: str, radius: float, fill: str, stroke: str
    ) -> None: ...

    def draw_text(
        self,
        element_id: str,
        parent_id: str,
        text: str,
        anchor: str,
        dx: float = 0,
        dy: float = 0,
        lines: list[str] | None = None,
    ) -> None: ...

    def draw_path(self, element_id: str, source: Position, target: Position) -> None: ...

    def transition(
        self, element_id: str, duration_ms: float, remove: bool = False, **attrs: Any
    ) -> None: ...

    def remove(self, element_id: str) -> None: ...


@dataclass
class SceneElement:
    """One retained element.

    Attributes:
        element_id: Caller-chosen identifier.
        kind: group, circle, text or path.
        parent_id: Containing group, if any.
        attrs: Current attribute values.
    """

    element_id: str
    kind: str
    parent_id: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict)


@dataclass
class _Transition:
    start: dict[str, Any]
    end: dict[str, Any]
    duration_ms: float
    remove: bool
    elapsed_ms: float = 0.0


def _interpolate(start: Any, end: Any, t: float) -> Any:
    if isinstance(start, Position) and isinstance(end, Position):
        return start.lerp(end, t)
    if isinstance(start, (int, float)) and isinstance(end, (int, float)):
        return start + (end - start) * t
    return end


class SceneSurface:
    """Retained scene graph driven by an explicit clock.

    A transition on an element that is already moving replaces the old
    one and starts from the element's current interpolated state, so
    the latest pass always wins. Removal takes the element and all of
    its children out of the scene at once.
    """

    def __init__(self) -> None:
        self._elements: dict[str, SceneElement] = {}
        self._transitions: dict[str, _Transition] = {}
        self.calls: list[tuple[str, str]] = []

    # Surface protocol

    def create_group(self, element_id: str, position: Position, **attrs: Any) -> None:
        if element_id in self._elements:
            self._drop(element_id)
        self._add(SceneElement(element_id, GROUP, None, {"position": position, **attrs}))
        self.calls.append(("create_group", element_id))

    def draw_circle(
        self, element_id: str, parent_id: str, radius: float, fill: str, stroke: str
    ) -> None:
        self._require(parent_id)
        self._add(
            SceneElement(
                element_id,
                CIRCLE,
                parent_id,
                {"radius": radius, "fill": fill, "stroke": stroke},
            )
        )
        self.calls.append(("draw_circle", element_id))

    def draw_text(
        self,
        element_id: str,
        parent_id: str,
        text: str,
        anchor: str,
        dx: float = 0,
        dy: float = 0,
        lines: list[str] | None = None,
    ) -> None:
        self._require(parent_id)
        self._add(
            SceneElement(
                element_id,
                TEXT,
                parent_id,
                {
                    "text": text,
                    "anchor": anchor,
                    "dx": dx,
                    "dy": dy,
                    "lines": list(lines) if lines else [text],
                    "opacity": 1.0,
                },
            )
        )
        self.calls.append(("draw_text", element_id))

    def draw_path(self, element_id: str, source: Position, target: Position) -> None:
        if element_id in self._elements:
            self._drop(element_id)
        self._add(SceneElement(element_id, PATH, None, {"source": source, "target": target}))
        self.calls.append(("draw_path", element_id))

    def transition(
        self, element_id: str, duration_ms: float, remove: bool = False, **attrs: Any
    ) -> None:
        element = self._require(element_id)
        start = {key: element.attrs.get(key, value) for key, value in attrs.items()}
        self._transitions[element_id] = _Transition(
            start=start, end=dict(attrs), duration_ms=max(0.0, duration_ms), remove=remove
        )
        self.calls.append(("transition", element_id))
        if duration_ms <= 0:
            self.advance(0)

    def remove(self, element_id: str) -> None:
        if element_id in self._elements:
            self._drop(element_id)
        self.calls.append(("remove", element_id))

    # Clock

    def advance(self, ms: float) -> None:
        """Move every running transition forward by ``ms`` milliseconds."""
        done: list[str] = []
        for element_id, tr in list(self._transitions.items()):
            tr.elapsed_ms += ms
            t = 1.0 if tr.duration_ms == 0 else min(1.0, tr.elapsed_ms / tr.duration_ms)
            element = self._elements[element_id]
            for key, end in tr.end.items():
                element.attrs[key] = _interpolate(tr.start[key], end, t)
            if t >= 1.0:
                done.append(element_id)

        for element_id in done:
            tr = self._transitions.pop(element_id, None)
            if tr is not None and tr.remove and element_id in self._elements:
                self._drop(element_id)

    def finish(self) -> None:
        """Run all transitions to completion."""
        while self._transitions:
            remaining = max(tr.duration_ms - tr.elapsed_ms for tr in self._transitions.values())
            self.advance(max(remaining, 0.0))

    # Queries

    @property
    def is_animating(self) -> bool:
        return bool(self._transitions)

    def get(self, element_id: str) -> SceneElement | None:
        return self._elements.get(element_id)

    def __contains__(self, element_id: object) -> bool:
        return element_id in self._elements

    def elements(self, kind: str | None = None) -> Iterator[SceneElement]:
        """Iterate elements in creation order, optionally of one kind."""
        for element in self._elements.values():
            if kind is None or element.kind == kind:
                yield element

    def children_of(self, parent_id: str) -> list[SceneElement]:
        return [e for e in self._elements.values() if e.parent_id == parent_id]

    # Internals

    def _add(self, element: SceneElement) -> None:
        self._elements[element.element_id] = element

    def _require(self, element_id: str) -> SceneElement:
        try:
            return self._elements[element_id]
        except KeyError:
            raise KeyError(f"No such element: {element_id}") from None

    def _drop(self, element_id: str) -> None:
        for child in self.children_of(element_id):
            self._drop(child.element_id)
        self._elements.pop(element_id, None)
        self._transitions.pop(element_id, None)
