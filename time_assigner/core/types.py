"""
Type definitions for time assignment.
"""

from dataclasses import dataclass, field
from typing import TypedDict, List


class AssignmentSummary(TypedDict):
    """Counts collected after a document has been assigned."""
    sheets: int
    nodes: int
    leaves: int
    estimated: int
    excluded: int
    unassigned: int


@dataclass
class BudgetState:
    """Per-run scratch state of a budget owner."""
    affect_nodes: List = field(default_factory=list)
    exclusion_time: int = 0


class AssignConfig:
    """Configuration for time assignment."""
    
    def __init__(
        self,
        excluded_prefix: str = '-',
        output_suffix: str = 'assigned',
        indent: int = 2,
        per_sheet: bool = True
    ):
        """
        Initialize time assignment configuration.
        
        Args:
            excluded_prefix: A leaf whose initialValues.result starts with this
                             prefix is cancelled and skipped entirely.
                             Default: '-'
            
            output_suffix: Suffix appended to the input file stem when no output
                           path is given (<stem>-<suffix>.json).
                           Default: 'assigned'
            
            indent: Indentation used when writing the output document.
                    Default: 2
            
            per_sheet: If True, each child of the document root is assigned as
                       an independent tree and the root never owns a budget.
                       If False, the document root itself is the tree root.
                       Default: True
        """
        self.excluded_prefix = excluded_prefix
        self.output_suffix = output_suffix
        self.indent = indent
        self.per_sheet = per_sheet
