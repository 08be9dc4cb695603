"""Steering controller for checkpoint pod races."""

__version__ = "0.1.0"
