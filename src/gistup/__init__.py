"""Unofficial toolkit for file uploads to GitHub gist."""

__version__ = "2.0.0"
