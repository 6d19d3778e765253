"""Placement algorithms and plan validation."""
