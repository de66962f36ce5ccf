"""Bundled configuration defaults (settings/defaults.yaml)."""
