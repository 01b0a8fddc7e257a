"""Outfit scoring, generation and boundary validation."""
