"""Infrastructure adapters: logging, HTTP and catalog stores."""
