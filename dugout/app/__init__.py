"""Dugout Flet application: state, routes, controllers and UI."""
