"""Command line interface for zed-devcontainer."""
