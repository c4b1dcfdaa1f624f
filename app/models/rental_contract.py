from enum import Enum


class ContractStatus(str, Enum):
    """Rental contract lifecycle status"""
    DRAFT = "draft"
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"
