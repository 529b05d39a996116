"""Search scoring primitives."""
