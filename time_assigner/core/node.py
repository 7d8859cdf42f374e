"""
Task node wrapper over a raw document mapping.
"""

from typing import Any, Dict, List, Optional

from ..extractors import parse_int

TIME_KEY = 'time'
DEFAULT_TIME_KEY = 'default_time'
RESULT_KEY = 'result'
ESTIMATED_TIME_KEY = 'estimated_time'


class TaskNode:
    """
    Typed view of one node of a task tree.

    The node keeps a reference to the mapping it was built from and every
    write goes straight into that mapping, so fields the assigner does not
    know about survive untouched and in their original order.
    """

    def __init__(self, data: Dict[str, Any], children: Optional[List['TaskNode']] = None):
        self.data = data
        self.children = children or []

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'TaskNode':
        """
        Wrap a raw mapping and all of its descendants.

        Null entries in a children list are skipped.

        Args:
            data: Raw node mapping

        Returns:
            TaskNode wrapping the mapping
        """
        raw_children = data.get('children') or []
        children = [cls.from_dict(child) for child in raw_children if isinstance(child, dict)]
        return cls(data, children)

    def to_dict(self) -> Dict[str, Any]:
        """Return the underlying mapping."""
        return self.data

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def variables(self) -> Dict[str, Any]:
        variables = self.data.get('variables')
        return variables if isinstance(variables, dict) else {}

    @property
    def initial_values(self) -> Dict[str, Any]:
        values = self.data.get('initialValues')
        return values if isinstance(values, dict) else {}

    @property
    def time(self) -> Optional[int]:
        """Explicit total time owned by this node."""
        return parse_int(self.variables.get(TIME_KEY))

    @property
    def default_time(self) -> Optional[int]:
        """Fallback per-leaf time offered to descendants."""
        return parse_int(self.variables.get(DEFAULT_TIME_KEY))

    @property
    def result(self) -> Optional[str]:
        result = self.initial_values.get(RESULT_KEY)
        return result if isinstance(result, str) else None

    @property
    def estimated_time(self) -> Optional[int]:
        return self.initial_values.get(ESTIMATED_TIME_KEY)

    @estimated_time.setter
    def estimated_time(self, value: int) -> None:
        if not isinstance(self.data.get('initialValues'), dict):
            self.data['initialValues'] = {}
        self.data['initialValues'][ESTIMATED_TIME_KEY] = value

    def is_excluded(self, prefix: str = '-') -> bool:
        """Check whether this node is marked as cancelled."""
        result = self.result
        return bool(result) and result.startswith(prefix)

    def __repr__(self) -> str:
        name = self.data.get('name') or self.data.get('id') or '?'
        return f"TaskNode({name!r}, children={len(self.children)})"
