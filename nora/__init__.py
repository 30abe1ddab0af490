"""Broadcast channels and polynomial neural network building blocks."""

__version__ = "0.1.0"