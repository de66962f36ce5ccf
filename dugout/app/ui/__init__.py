"""Flet UI building blocks."""
