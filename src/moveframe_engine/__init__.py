"""Moveframe engine: workout parameter normalization, individual plans and circuit matrices."""

__version__ = "0.1.0"
