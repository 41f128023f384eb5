"""Sprites, render scaling, on-screen messages and helpers for a game launcher."""

__version__ = "0.1.0"