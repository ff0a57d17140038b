"""CLI commands for zed-devcontainer."""
