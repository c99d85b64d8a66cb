"""Asynchronous Python client for the LIFX cloud API."""

__version__ = "0.1.0"
