"""Core components for time assignment."""

from .assigner import TimeAssigner
from .node import TaskNode
from .types import AssignConfig, AssignmentSummary, BudgetState

__all__ = ["TimeAssigner", "TaskNode", "AssignConfig", "AssignmentSummary", "BudgetState"]
