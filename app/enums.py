"""Enums for consistent string constants across the application."""
from enum import Enum


class MetalType(str, Enum):
    GOLD = "gold"
    SILVER = "silver"
