"""Configuration: paths, TOML config, derived settings and display settings."""
