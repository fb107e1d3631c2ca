"""
Database package — centralised connection handlers.
"""

from .arango_handler import ArangoHandler

__all__ = ["ArangoHandler"]
