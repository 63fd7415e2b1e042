"""Scene nodes, handles to them and the base class for engine systems."""

from abc import ABC, abstractmethod


class Node:
    """An object in a scene that events and components attach to."""

    __slots__ = ()


class NodeHandle:
    """A lightweight reference to a node; compares by node identity."""

    __slots__ = ("_node",)

    def __init__(self, node=None):
        self._node = node

    def is_valid(self):
        """Return True if the handle refers to a node."""
        return self._node is not None

    def get(self):
        """Return the referenced node, or None."""
        return self._node

    def __eq__(self, other):
        if not isinstance(other, NodeHandle):
            return NotImplemented
        return self._node is other._node

    def __hash__(self):
        return id(self._node)

    def __repr__(self):
        return f"NodeHandle({self._node!r})"


class System(ABC):
    """Base class for self-contained engine systems updated every frame."""

    def __init__(self, scene):
        self.scene = scene

    @abstractmethod
    def on_update(self, dt):
        """Advance the system by ``dt`` seconds."""