"""Dugout shared layer: core infrastructure and domain logic."""
