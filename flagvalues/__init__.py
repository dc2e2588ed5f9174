"""Typed command-line flag values: integers, strings, lists, maps and IP addresses parsed from and rendered to text."""

__version__ = "0.1.0"