"""Advent of Code 2024 solutions with a terminal calendar of results."""

__version__ = "0.1.0"