"""User interfaces for sizeof."""
