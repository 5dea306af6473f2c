"""
Base Value Object Classes

Shared enum base for status-like value objects.
"""

from enum import Enum


class StatusEnum(str, Enum):
    """
    Base class for status enums.

    Members compare equal to their string values, which is how they are stored.
    """
