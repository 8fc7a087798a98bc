"""Exceptions raised for malformed mirroring problems and queries."""

from __future__ import annotations


class ValidationError(ValueError):
    """Base class for every rejected problem definition or query."""


class InvalidConfigurationError(ValidationError):
    """Malformed boundary type, non-finite or out-of-range scalar, bad array length."""


class GeometryError(ValidationError):
    """Conductor or point outside the domain, or overlapping conductors."""


class QueryShapeError(ValidationError):
    """Current matrix or coordinate arrays with an unexpected shape."""
