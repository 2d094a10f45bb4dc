"""Stockroom: user accounts and product inventory over HTTP."""

__version__ = "0.1.0"
