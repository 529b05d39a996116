"""Diagram placeholder and legacy element primitives."""
