"""Hangeul jamo composition, configuration loading, background color effects and a command-line front end."""

__version__ = "0.1.0"