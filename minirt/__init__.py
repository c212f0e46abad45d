"""Scene types and text, number, list and line-reading utilities for a small ray tracer."""

__version__ = "0.1.0"