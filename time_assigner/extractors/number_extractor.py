"""
Lenient integer parsing for author-supplied fields.
"""

import re
from typing import Any, Optional

INTEGER_PATTERN = re.compile(r'^\s*[+-]?[0-9]+\s*$', re.ASCII)

# Values outside a signed 32-bit integer are treated as absent
INT_MIN = -2**31
INT_MAX = 2**31 - 1


def parse_int(value: Any) -> Optional[int]:
    """
    Parse an author-supplied value as an integer.
    
    Integers pass through unchanged and strings holding a plain ASCII
    decimal integer (surrounding whitespace and a sign allowed) are
    converted. Everything else, including floats, booleans, strings like
    "1.5" or full-width digits, yields None, as does any result outside
    the signed 32-bit range.
    
    Args:
        value: Raw value from a variables mapping
        
    Returns:
        Parsed integer, or None when the value is not an integer
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and INTEGER_PATTERN.match(value):
        number = int(value)
    else:
        return None
    if number < INT_MIN or number > INT_MAX:
        return None
    return number
