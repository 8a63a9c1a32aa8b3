"""Fairy chess: a rules engine for standard and fairy piece sets."""

__version__ = "0.1.0"
