"""
Parent side table for task trees.
"""

from typing import Dict, Iterator, Optional

from ..core.node import TaskNode


class ParentLinks:
    """
    Child-to-parent lookup built for a single run.
    
    Links are keyed by node identity and never stored on the nodes
    themselves, so discarding the table is all the cleanup they need.
    """
    
    def __init__(self):
        self._parents: Dict[int, TaskNode] = {}
    
    @classmethod
    def build(cls, root: TaskNode) -> 'ParentLinks':
        """
        Record the immediate parent of every node below root.
        
        Args:
            root: Tree root (gets no parent)
            
        Returns:
            Populated ParentLinks
        """
        links = cls()
        links._link(root)
        return links
    
    def _link(self, node: TaskNode) -> None:
        for child in node.children:
            self._parents[id(child)] = node
            self._link(child)
    
    def parent_of(self, node: TaskNode) -> Optional[TaskNode]:
        return self._parents.get(id(node))
    
    def ancestors(self, node: TaskNode) -> Iterator[TaskNode]:
        """Yield parent, grandparent, ... up to the root."""
        parent = self.parent_of(node)
        while parent is not None:
            yield parent
            parent = self.parent_of(parent)
    
    def __len__(self) -> int:
        return len(self._parents)
