"""Logging, metrics and request id helpers."""
