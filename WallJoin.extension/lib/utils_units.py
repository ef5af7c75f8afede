# -*- coding: utf-8 -*-

"""Units conversion helpers for Revit.

Revit internal length unit is the foot. Wall thickness thresholds are
given in millimeters and converted once per command run.

Example:
    >>> from utils_units import mm_to_ft, ft_to_mm
    >>> mm_to_ft(304.8)
    1.0
    >>> ft_to_mm(1.0)
    304.8
"""
from typing import Optional, Union


MM_PER_FOOT: float = 304.8


def mm_to_ft(mm: Optional[Union[float, int, str]]) -> Optional[float]:
    """Convert millimeters to feet (Revit internal units).

    Args:
        mm: Value in millimeters. Numeric strings are accepted.

    Returns:
        Value in feet, or None if input is None.
    """
    if mm is None:
        return None
    return float(mm) / MM_PER_FOOT


def ft_to_mm(ft: Optional[Union[float, int, str]]) -> Optional[float]:
    """Convert feet (Revit internal units) to millimeters."""
    if ft is None:
        return None
    return float(ft) * MM_PER_FOOT


def format_mm(ft: Optional[float], digits: int = 0) -> str:
    """Format an internal length as a millimeter label for reports.

    Examples:
        >>> format_mm(mm_to_ft(450))
        '450 mm'
        >>> format_mm(None)
        '?'
    """
    mm = ft_to_mm(ft)
    if mm is None:
        return "?"
    return "{0:.{1}f} mm".format(mm, digits)
