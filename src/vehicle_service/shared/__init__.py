"""Cross-cutting configuration, logging and formatting helpers."""
