"""This module defines enums used when comparing version values."""
from enum import IntEnum

class VersionComparison(IntEnum):
    """Result of comparing the current version with another one."""

    Older = -1
    Current = 0
    Newer = 1
