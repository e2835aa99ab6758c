"""Fixed policy constants used by the detectors."""
