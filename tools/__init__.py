"""Persistence and observability helpers."""
