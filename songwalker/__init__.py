"""Mixing, MIDI routing, metering, parameter and keyboard models for a multi-timbral instrument."""

__version__ = "0.2.1"

__all__ = ["audio", "midi", "notes", "params", "piano", "resize", "visualizer"]