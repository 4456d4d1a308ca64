"""Solvers for days 1 to 24 of a programming puzzle calendar, with an input file reader."""

__version__ = "0.1.0"