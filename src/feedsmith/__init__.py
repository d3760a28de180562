"""Feedsmith - build podcast RSS feeds from hosting-site channel pages."""

__version__ = "0.1.0"
