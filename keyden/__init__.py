"""Manage, rotate and generate secret keys kept in a plain text key file."""

__version__ = "0.1.7"