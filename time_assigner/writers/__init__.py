"""Output writers for assigned task trees."""

from .tree_writer import TreeWriter

__all__ = ["TreeWriter"]
