"""
JSON task tree output.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.types import AssignConfig


class TreeWriter:
    """Writes assigned task tree documents."""
    
    def __init__(self, config: AssignConfig):
        """
        Initialize with assignment configuration.
        
        Args:
            config: AssignConfig instance
        """
        self.config = config
    
    def default_output_path(self, input_path: str) -> str:
        """
        Build <input dir>/<input stem>-<suffix>.json next to the input.
        
        Args:
            input_path: Path of the input document
            
        Returns:
            Output path as a string
        """
        path = Path(input_path)
        return str(path.with_name(f"{path.stem}-{self.config.output_suffix}.json"))
    
    def dumps(self, document: Dict[str, Any]) -> str:
        """Serialize a document, keeping key order."""
        return json.dumps(document, indent=self.config.indent, ensure_ascii=False)
    
    def write(self, document: Dict[str, Any], input_path: str, output_path: Optional[str] = None) -> str:
        """
        Write the document to output_path, or beside the input when omitted.
        
        Args:
            document: Assigned document root
            input_path: Path the document was read from
            output_path: Explicit output path (optional)
            
        Returns:
            Path the document was written to
        """
        if not output_path:
            output_path = self.default_output_path(input_path)
        
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(self.dumps(document))
        
        print(f"Wrote {output_path}")
        return output_path
