"""Bundled JSON schemas for the analysis-result wire contract."""
