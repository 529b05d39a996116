"""Feature packages: catalog, search and diagram."""
