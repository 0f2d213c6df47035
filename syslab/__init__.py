"""Exercises in CPU scheduling, file appending, process launching and TCP/UDP sockets."""

__version__ = "0.1.0"