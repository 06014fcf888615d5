"""
Base class for iterative simulations.

Provides the shared infrastructure of a tick-driven simulation:

- Event system (start/tick/end events)
- Node storage and read access
- A run loop driving tick()
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Event, EventCallback, EventType, Node
from .validation import validate_count


class IterativeSimulation(ABC):
    """
    Abstract base class for simulations advanced one tick at a time.

    Subclasses implement tick(); callers either drive tick() themselves
    (e.g. once per animation frame) or use run() for a batch of ticks.

    Example:
        sim = SomeSimulation(points, on_tick=lambda e: print(e["node_count"]))
        sim.run(iterations=100)

        for x, y in sim.get_points():
            ...
    """

    def __init__(
        self,
        *,
        on_start: Optional[EventCallback] = None,
        on_tick: Optional[EventCallback] = None,
        on_end: Optional[EventCallback] = None,
    ) -> None:
        """
        Initialize event registry and empty node list.

        Args:
            on_start: Callback for start event
            on_tick: Callback for tick event
            on_end: Callback for end event
        """
        self._nodes: list[Node] = []
        self._events: dict[EventType, EventCallback] = {}
        self._iteration: int = 0

        # Register event callbacks
        if on_start:
            self._events[EventType.start] = on_start
        if on_tick:
            self._events[EventType.tick] = on_tick
        if on_end:
            self._events[EventType.end] = on_end

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def nodes(self) -> list[Node]:
        """Get the list of nodes in curve order."""
        return self._nodes

    @property
    def iteration(self) -> int:
        """Number of completed ticks."""
        return self._iteration

    def __len__(self) -> int:
        return len(self._nodes)

    # -------------------------------------------------------------------------
    # Event System
    # -------------------------------------------------------------------------

    def on(self, event: EventType | str, callback: EventCallback) -> Self:
        """
        Subscribe to a simulation event.

        Args:
            event: Event type (EventType enum or string name)
            callback: Function to call when event fires

        Returns:
            self (for chaining)
        """
        if isinstance(event, str):
            event = EventType[event]
        self._events[event] = callback
        return self

    def trigger(self, event: Event) -> None:
        """
        Trigger an event, calling the registered callback.

        Args:
            event: Event payload with type and optional data
        """
        event_type = event.get("type")
        if event_type is not None and event_type in self._events:
            self._events[event_type](event)

    def _event(self, event_type: EventType) -> Event:
        return {
            "type": event_type,
            "iteration": self._iteration,
            "node_count": len(self._nodes),
        }

    # -------------------------------------------------------------------------
    # Lifecycle Methods
    # -------------------------------------------------------------------------

    @abstractmethod
    def tick(self) -> None:
        """Advance the simulation by exactly one iteration."""
        pass

    def run(self, iterations: int, max_nodes: Optional[int] = None) -> Self:
        """
        Run a batch of ticks.

        Fires start event, ticks, fires end event.

        Args:
            iterations: Number of ticks to perform
            max_nodes: Stop early once the node count reaches this value

        Returns:
            self (for chaining)

        Raises:
            InvalidParameterError: If iterations or max_nodes is negative
        """
        iterations = validate_count("iterations", iterations)
        if max_nodes is not None:
            max_nodes = validate_count("max_nodes", max_nodes)

        self.trigger(self._event(EventType.start))

        for _ in range(iterations):
            if max_nodes is not None and len(self._nodes) >= max_nodes:
                break
            self.tick()

        self.trigger(self._event(EventType.end))
        return self


__all__ = ["IterativeSimulation"]
