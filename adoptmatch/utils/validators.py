"""
Input normalization and validation utilities.
"""

from typing import Any, Dict, Optional


def normalize_code(value: Any, upper: bool = True) -> Optional[str]:
    """
    Normalize an enum-like code for comparison.

    Args:
        value: Raw code (any type)
        upper: Upper-case the code (False lower-cases it)

    Returns:
        Stripped, case-folded code, or None when blank or missing
    """
    if value is None:
        return None
    code = str(value).strip()
    if not code:
        return None
    return code.upper() if upper else code.lower()


def ordinal(order: Dict[str, int], code: Optional[str]) -> int:
    """Position of a code in an ordinal scale, -1 when unknown."""
    if code is None:
        return -1
    return order.get(code, -1)

