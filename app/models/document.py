from enum import Enum


class DocumentCategory(str, Enum):
    """Document category enum"""
    CONTRACTS = "contracts"
    RECEIPTS = "receipts"
    IDENTITIES = "identities"
    PROPERTY = "property"
    OTHER = "other"
