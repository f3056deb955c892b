"""Validators package."""

from .predicate_validator import PredicateValidator

__all__ = ["PredicateValidator"]
