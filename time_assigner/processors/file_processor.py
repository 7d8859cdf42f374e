"""
JSON task tree loading using streaming parser.
"""

import ijson
from typing import Any, Dict


class TreeFileProcessor:
    """Loads task tree documents from JSON files."""
    
    @staticmethod
    def process_file(file_path: str) -> Dict[str, Any]:
        """
        Read a task tree document and check its top-level shape.
        
        Args:
            file_path: Path to the JSON document
            
        Returns:
            Document root mapping
            
        Raises:
            ValueError: If the root is not an object with a children list
        """
        print(f"Processing {file_path}...")
        
        with open(file_path, 'rb') as f:
            # Exhaust the parser so data after the first value raises
            documents = list(ijson.items(f, '', use_float=True))
        
        document = documents[0] if documents else None
        
        TreeFileProcessor.validate_document(document)
        
        print(f"Completed reading file: {len(document['children'])} sheets found.")
        return document
    
    @staticmethod
    def validate_document(document: Any) -> None:
        """
        Reject documents the assigner cannot walk.
        
        Args:
            document: Parsed document root
            
        Raises:
            ValueError: If the root is not an object with a children list
        """
        if not isinstance(document, dict):
            raise ValueError("Document root must be a JSON object")
        if not isinstance(document.get('children'), list):
            raise ValueError("Document root has no 'children' list")
