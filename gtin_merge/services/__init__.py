"""Extraction, orchestration, progress and summary services."""
