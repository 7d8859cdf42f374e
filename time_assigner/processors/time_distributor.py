"""
Distribution of owner budgets over affected leaves.
"""

from typing import Dict, List

from ..core.node import TaskNode
from ..core.types import AssignConfig, BudgetState
from .tree_walker import walk_pre_order


class TimeDistributor:
    """Writes estimated times from owner budgets."""
    
    def __init__(self, config: AssignConfig):
        self.config = config
    
    @staticmethod
    def split_evenly(total: int, count: int) -> List[int]:
        """
        Split total into count integer shares that sum to total.
        
        The first (total mod count) shares get one extra unit.
        
        Args:
            total: Amount to split (non-negative)
            count: Number of shares (positive)
            
        Returns:
            List of shares in recipient order
        """
        base, remain = divmod(total, count)
        return [base + 1 if i < remain else base for i in range(count)]
    
    def distribute(self, root: TaskNode, budgets: Dict[int, BudgetState]) -> List[TaskNode]:
        """
        Pass 3: Give leaves with an explicit time that time, and split each
        owner's remaining budget across its affected leaves.
        
        Args:
            root: Tree root
            budgets: Scratch state filled by BudgetClassifier
            
        Returns:
            Leaves whose estimated time was written, in write order
        """
        written: List[TaskNode] = []
        walk_pre_order(root, lambda node: self._distribute_node(node, budgets, written))
        return written
    
    def _distribute_node(self, node: TaskNode, budgets: Dict[int, BudgetState], written: List[TaskNode]) -> None:
        time = node.time
        if time is None:
            return
        
        if node.is_leaf:
            if not node.is_excluded(self.config.excluded_prefix):
                node.estimated_time = time
                written.append(node)
            return
        
        state = budgets[id(node)]
        if not state.affect_nodes:
            return
        
        adjusted_time = max(0, time - state.exclusion_time)
        shares = self.split_evenly(adjusted_time, len(state.affect_nodes))
        for affect_node, share in zip(state.affect_nodes, shares):
            affect_node.estimated_time = share
            written.append(affect_node)
