"""
Budget owner discovery and leaf classification.
"""

from typing import Dict, List

from ..core.node import TaskNode
from ..core.types import AssignConfig, BudgetState
from .parent_linker import ParentLinks
from .tree_walker import walk_pre_order


class BudgetClassifier:
    """Finds budget owners and sorts every node under its nearest owner."""
    
    def __init__(self, config: AssignConfig):
        """
        Initialize with assignment configuration.
        
        Args:
            config: AssignConfig instance
        """
        self.config = config
    
    @staticmethod
    def initialize_owners(root: TaskNode) -> Dict[int, BudgetState]:
        """
        Pass 1: Create empty scratch state for every non-leaf node that
        carries a parseable time. Leaves never own a budget.
        
        Args:
            root: Tree root
            
        Returns:
            Mapping of node identity -> BudgetState
        """
        budgets: Dict[int, BudgetState] = {}
        
        def init_owner(node: TaskNode) -> None:
            if node.is_leaf:
                return
            if node.time is not None:
                budgets[id(node)] = BudgetState()
        
        walk_pre_order(root, init_owner)
        return budgets
    
    def classify(self, root: TaskNode, parents: ParentLinks, budgets: Dict[int, BudgetState]) -> List[TaskNode]:
        """
        Pass 2: Attribute every node to its nearest budget-owning ancestor.
        
        Leaves without a time join the owner's affected nodes. Nodes with a
        time (explicit, or a default picked up on the way up) add it to the
        owner's exclusion time. Cancelled leaves are skipped.
        
        Args:
            root: Tree root
            parents: Parent links for the tree
            budgets: Scratch state from initialize_owners (modified in-place)
            
        Returns:
            Leaves that received a default time
        """
        defaulted: List[TaskNode] = []
        walk_pre_order(root, lambda node: self._classify_node(node, parents, budgets, defaulted))
        return defaulted
    
    def _classify_node(
        self,
        node: TaskNode,
        parents: ParentLinks,
        budgets: Dict[int, BudgetState],
        defaulted: List[TaskNode]
    ) -> None:
        if node.is_leaf and node.is_excluded(self.config.excluded_prefix):
            return
        
        time = node.time
        for ancestor in parents.ancestors(node):
            if ancestor.time is not None:
                state = budgets[id(ancestor)]
                if time is None:
                    if node.is_leaf:
                        state.affect_nodes.append(node)
                else:
                    state.exclusion_time += time
                return
            
            # Only a leaf still lacking a time picks up a default
            if node.is_leaf and time is None:
                default_time = ancestor.default_time
                if default_time is not None:
                    node.estimated_time = default_time
                    defaulted.append(node)
                    time = default_time
