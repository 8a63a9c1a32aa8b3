"""Themes and QSS."""
