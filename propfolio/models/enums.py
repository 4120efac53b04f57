"""Enumeration types for portfolio entities."""

from enum import Enum


class PropertyType(str, Enum):
    LAND_WITH_IMPROVEMENTS = "Land with Agricultural Improvements"
    LAND_WITHOUT_IMPROVEMENTS = "Land w/o Agricultural Improvements"
    LAND_AND_BUILDING = "Land and Building"
    HOUSE_AND_LOT = "House and Lot"
    COMMERCIAL_BUILDING = "Commercial Building"
    CONDOTEL = "Condotel"
    CONDOMINIUM = "Condominium"
    WAREHOUSE_AND_LOT = "Warehouse & Lot"


class Region(str, Enum):
    LUZON = "Luzon"
    VISAYAS = "Visayas"
    MINDANAO = "Mindanao"


class PaymentStatus(str, Enum):
    """Acquisition payment status of a property."""

    CASH = "Cash"
    AMORTIZED = "Amortized"
    FULLY_PAID = "Fully Paid"


class LeaseStatus(str, Enum):
    ACTIVE = "active"
    EXPIRED = "expired"
    TERMINATED = "terminated"


class PaymentRecordStatus(str, Enum):
    """Status of a rent payment record."""

    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class TenantStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class DocumentType(str, Enum):
    TCT = "TCT"  # Transfer certificate of title
    TD = "TD"  # Tax declaration
    CCT = "CCT"  # Condominium certificate of title
    DOAS = "DOAS"  # Deed of absolute sale
    CTS = "CTS"  # Contract to sell
    COL = "COL"  # Certificate of lease
    LEASE_CONTRACT = "Lease Contract"
    INSURANCE_POLICY = "Insurance Policy"


class DocumentPriority(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class DocumentState(str, Enum):
    AVAILABLE = "Available"
    PENDING = "Pending"
    EXPIRED = "Expired"
