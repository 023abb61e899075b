"""Hotseat: a two-player, same-screen chess rules engine."""

__version__ = "0.1.0"
