"""
Removal of raw inputs and leftover transient fields.
"""

from ..core.node import TaskNode, TIME_KEY, DEFAULT_TIME_KEY
from .tree_walker import walk_pre_order

CONSUMED_VARIABLES = (TIME_KEY, DEFAULT_TIME_KEY)
TRANSIENT_FIELDS = ('parent', 'affectNodes', 'exclusionTime')


class FieldCleaner:
    """Strips fields that must not reach the output document."""
    
    @staticmethod
    def clean(root: TaskNode) -> None:
        """
        Remove time/default_time from every variables mapping, plus any
        transient fields left behind in the input by an earlier tool.
        
        Args:
            root: Tree root (modified in-place)
        """
        def clean_node(node: TaskNode) -> None:
            for name in TRANSIENT_FIELDS:
                node.data.pop(name, None)
            variables = node.data.get('variables')
            if isinstance(variables, dict):
                for name in CONSUMED_VARIABLES:
                    variables.pop(name, None)
        
        walk_pre_order(root, clean_node)
