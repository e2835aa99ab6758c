"""Shared helpers: canonical JSON and exit codes."""
