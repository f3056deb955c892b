"""Parsers package."""

from .json_parser import JsonParser

__all__ = ["JsonParser"]
