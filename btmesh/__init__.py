"""Bluetooth Mesh value types: mesh counters, segments, foundation states, publication, health and sequence counters."""

__version__ = "0.1.0"