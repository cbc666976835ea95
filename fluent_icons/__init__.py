"""Fluent UI System Icons embedded as Python ``bytes`` constants.

The package version tracks the upstream icon release tag it generates from.
"""

__version__ = "1.1.261"
