"""Catalog domain types, values and errors."""
