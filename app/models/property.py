from enum import Enum


class PropertyStatus(str, Enum):
    """Property availability status"""
    AVAILABLE = "available"
    RENTED = "rented"
    SOLD = "sold"
