"""Events, subscription handles and the event dispatcher."""

from dataclasses import dataclass, field
from enum import Enum
from itertools import count
from typing import Any, Callable, NamedTuple


class PropagationMode(Enum):
    """How an event travels through the node hierarchy."""

    BUBBLE_UP = "bubble_up"  # from target up to root
    CAPTURE_DOWN = "capture_down"  # from root down to target
    DIRECT = "direct"  # only to target


@dataclass(frozen=True)
class Connection:
    """A subscription handle; pass it to ``Dispatcher.disconnect``."""

    id: int = 0

    def is_valid(self):
        """Return True unless this is the empty handle."""
        return self.id != 0


@dataclass
class Event:
    """Base class for events; user events derive from it."""

    mode: PropagationMode = PropagationMode.BUBBLE_UP
    _handled: bool = field(default=False, init=False, repr=False)

    def handled(self):
        """Return True once propagation has been stopped."""
        return self._handled

    def stop_propagation(self):
        """Mark the event handled so no further handlers run."""
        self._handled = True


EventCallback = Callable[[Event], Any]


class _HandlerEntry(NamedTuple):
    node: Any
    event_type: int
    id: int
    callback: EventCallback


class Dispatcher:
    """Routes events to callbacks subscribed on a node for an event type."""

    def __init__(self):
        self._handlers: list[_HandlerEntry] = []
        self._ids = count(1)

    def connect(self, node, event_type, callback):
        """Subscribe ``callback`` to ``event_type`` on ``node``."""
        connection = Connection(next(self._ids))
        self._handlers.append(_HandlerEntry(node, event_type, connection.id, callback))
        return connection

    def disconnect(self, connection):
        """Remove the subscription behind ``connection``; empty handles are ignored."""
        if not connection.is_valid():
            return
        self._handlers = [h for h in self._handlers if h.id != connection.id]

    def dispatch(self, target, event_type, event):
        """Call matching handlers in subscription order until one stops propagation."""
        for entry in list(self._handlers):
            if entry.event_type == event_type and entry.node is target:
                entry.callback(event)
                if event.handled():
                    break