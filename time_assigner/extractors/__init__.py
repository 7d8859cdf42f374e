"""Field extraction utilities for task nodes."""

from .number_extractor import parse_int

__all__ = ["parse_int"]
