from enum import Enum


class CustomerType(str, Enum):
    """Customer type enum"""
    INDIVIDUAL = "individual"
    COMPANY = "company"
