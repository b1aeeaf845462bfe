"""Typed errors raised by the comparison library."""

from __future__ import annotations


class GeoJSONCompareError(RuntimeError):
    """Base error for comparison library failures."""


class DigestError(GeoJSONCompareError):
    """Raised when the SHA-256 primitive fails to produce a digest."""


class PayloadTypeError(GeoJSONCompareError, TypeError):
    """Raised when a payload handed to the comparator is not text."""


class IntakeError(ValueError):
    """Base error for rejected input files."""


class UnsupportedFileTypeError(IntakeError):
    """Raised when a filename does not carry an accepted extension."""


class InvalidGeoJSONError(IntakeError):
    """Raised when file content is not a GeoJSON-shaped JSON document."""
