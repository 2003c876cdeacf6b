"""Explicit entity <-> DTO conversions, one module per entity pair."""
