"""Engine core: nodes, a system base class, an event dispatcher, logging helpers and a sample."""

__version__ = "0.1.0"
__all__ = ["debug", "events", "node", "sample"]