"""
Main time assigner orchestrator.
"""

from typing import Any, Dict, List, Optional, Set

from ..core.node import TaskNode
from ..core.types import AssignConfig, AssignmentSummary
from ..processors import (
    TreeFileProcessor,
    ParentLinks,
    BudgetClassifier,
    TimeDistributor,
    FieldCleaner,
    iter_pre_order
)
from ..writers import TreeWriter


class TimeAssigner:
    """Main orchestrator for time assignment."""
    
    def __init__(
        self,
        excluded_prefix: str = '-',
        output_suffix: str = 'assigned',
        indent: int = 2,
        per_sheet: bool = True
    ):
        """
        Initialize the TimeAssigner.
        
        Args:
            excluded_prefix: Result prefix that marks a leaf as cancelled
            output_suffix: Suffix of the default output file name
            indent: Indentation of the written JSON
            per_sheet: If True, assign each child of the document root separately
        """
        self.config = AssignConfig(
            excluded_prefix=excluded_prefix,
            output_suffix=output_suffix,
            indent=indent,
            per_sheet=per_sheet
        )
        
        self.file_processor = TreeFileProcessor()
        self.classifier = BudgetClassifier(self.config)
        self.distributor = TimeDistributor(self.config)
        self.cleaner = FieldCleaner()
        self.writer = TreeWriter(self.config)
        
        self.summary: Optional[AssignmentSummary] = None
        self.estimated_nodes: List[TaskNode] = []
    
    def assign(self, root: TaskNode) -> TaskNode:
        """
        Assign estimated times to the leaves of one tree.
        
        Parent links and owner scratch state only live for the duration of
        this call; the tree is modified in-place and returned. The leaves that
        received an estimate are recorded in estimated_nodes.
        
        Args:
            root: Tree root
            
        Returns:
            The same root
        """
        # Build parent links
        parents = ParentLinks.build(root)
        
        # Pass 1: Find budget owners
        budgets = self.classifier.initialize_owners(root)
        
        # Pass 2: Sort nodes under their nearest owner
        defaulted = self.classifier.classify(root, parents, budgets)
        
        # Pass 3: Write estimates
        written = self.distributor.distribute(root, budgets)
        
        self.estimated_nodes = defaulted + written
        
        # Cleanup: Drop consumed inputs
        self.cleaner.clean(root)
        
        return root
    
    def assign_document(self, document: Dict[str, Any]) -> Dict[str, Any]:
        """
        Assign every sheet of a parsed document.
        
        Args:
            document: Document root mapping (modified in-place)
            
        Returns:
            The same document
        """
        TreeFileProcessor.validate_document(document)
        
        root = TaskNode.from_dict(document)
        sheets = root.children if self.config.per_sheet else [root]
        
        estimated_ids = set()
        for sheet in sheets:
            self.assign(sheet)
            estimated_ids.update(id(node) for node in self.estimated_nodes)
        
        self.summary = self._summarize(sheets, estimated_ids)
        return document
    
    def process_file(self, file_path: str, output_path: Optional[str] = None) -> str:
        """
        Read a document, assign it, and write the result.
        
        Args:
            file_path: Path to the input JSON document
            output_path: Path for the output (default: <stem>-assigned.json)
            
        Returns:
            Path the output was written to
        """
        # Step 1: Read the document
        document = self.file_processor.process_file(file_path)
        
        # Step 2: Assign times
        self.assign_document(document)
        
        # Step 3: Write it back
        written_path = self.writer.write(document, file_path, output_path)
        
        # Step 4: Report summary
        summary = self.summary
        print(f"\nAssigned {summary['estimated']} of {summary['leaves']} leaves "
              f"across {summary['sheets']} sheets")
        print(f"Skipped {summary['excluded']} cancelled leaves, "
              f"{summary['unassigned']} leaves have no budget")
        
        return written_path
    
    def _summarize(self, sheets: List[TaskNode], estimated_ids: Set[int]) -> AssignmentSummary:
        summary: AssignmentSummary = {
            'sheets': len(sheets),
            'nodes': 0,
            'leaves': 0,
            'estimated': 0,
            'excluded': 0,
            'unassigned': 0,
        }
        for sheet in sheets:
            for node in iter_pre_order(sheet):
                summary['nodes'] += 1
                if not node.is_leaf:
                    continue
                summary['leaves'] += 1
                if node.is_excluded(self.config.excluded_prefix):
                    summary['excluded'] += 1
                elif id(node) in estimated_ids:
                    summary['estimated'] += 1
                else:
                    summary['unassigned'] += 1
        return summary
