"""Simulated microcontroller peripherals and drivers, a serial command shell, and string and buffer helpers."""

__version__ = "0.1.0"