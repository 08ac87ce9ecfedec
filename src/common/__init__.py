"""Shared infrastructure: logging, storage and telemetry."""
