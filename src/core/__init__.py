"""
Core digit algorithms
"""

from .digits import DigitOps, IntType, OverflowPolicy, ops_for

__all__ = [
    "DigitOps",
    "IntType",
    "OverflowPolicy",
    "ops_for",
]
