"""Rendering constants for frange.

These symbols are used by ``str()`` on ranges and multi-ranges, so the
textual form of a value depends only on its canonical structure.
"""

NEG_INFINITY = "-∞"
POS_INFINITY = "∞"
UNION_SEPARATOR = " ∪ "
EMPTY_SET = "∅"
