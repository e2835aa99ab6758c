"""Renderers for analysis results."""
