"""Orchestration of the external analyzer process."""
