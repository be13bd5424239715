"""
Type definitions used across layers
"""

from enum import IntEnum


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2
