"""
Time Assigner - Task Tree Time Estimation Tool
"""

__version__ = "1.0.0"

from .core.assigner import TimeAssigner
from .core.node import TaskNode
from .core.types import AssignConfig, AssignmentSummary

__all__ = ["TimeAssigner", "TaskNode", "AssignConfig", "AssignmentSummary"]
