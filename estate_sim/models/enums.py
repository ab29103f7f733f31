"""Enumeration types for the simulation domain."""

from enum import Enum


class Location(str, Enum):
    DOWNTOWN = "Downtown"
    URBAN = "Urban"
    SUBURBAN = "Suburban"
    COUNTRY = "Country"


class PropertyType(str, Enum):
    HOUSE = "House"
    APARTMENT = "Apartment"
    COMMERCIAL = "Commercial"
    INDUSTRIAL = "Industrial"
    LAND = "Land"
    MIXED_USE = "Mixed Use"
    VACATION = "Vacation"
    CONDO = "Condo"
    TOWNHOUSE = "Townhouse"
    VILLA = "Villa"
    BUNGALOW = "Bungalow"
    MANSION = "Mansion"
    COTTAGE = "Cottage"
    DUPLEX = "Duplex"
    FARMHOUSE = "Farmhouse"
    CHALET = "Chalet"
    CABIN = "Cabin"
    TINY_HOME = "Tiny Home"
    ROW_HOUSE = "Row House"
    MOBILE_HOME = "Mobile Home"
    COLONIAL_HOUSE = "Colonial House"
    RANCH_HOUSE = "Ranch House"
    SKYSCRAPER_CONDO = "Skyscraper Condo"
    HOUSEBOAT = "Houseboat"


class PriceTier(str, Enum):
    """Base price-per-m² tier a property type belongs to."""

    LUXURY = "LUXURY"
    HIGH_END = "HIGH_END"
    STANDARD = "STANDARD"
    SPECIAL = "SPECIAL"
    COMMERCIAL = "COMMERCIAL"
    INDUSTRIAL = "INDUSTRIAL"
    LAND = "LAND"
    VACATION = "VACATION"
    DEFAULT = "DEFAULT"


class NeighborhoodQuality(str, Enum):
    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    BELOW_AVERAGE = "Below Average"
    POOR = "Poor"


class ViewQuality(str, Enum):
    SCENIC = "Scenic"
    WATER = "Water"
    CITY = "City"
    MOUNTAIN = "Mountain"
    GARDEN = "Garden"
    NONE = "None"


class RenovationPotential(str, Enum):
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
    NONE = "None"


class IntendedPurpose(str, Enum):
    HOUSING = "Housing"
    BUSINESS = "Business"


class Occupation(str, Enum):
    DOCTOR = "Doctor"
    LAWYER = "Lawyer"
    TEACHER = "Teacher"
    ENGINEER = "Engineer"
    RETAIL_WORKER = "Retail Worker"
    OFFICE_WORKER = "Office Worker"
    MANAGER = "Manager"
    BUSINESS_OWNER = "Business Owner"
    SERVICE_WORKER = "Service Worker"
    FREELANCER = "Freelancer"
    STUDENT = "Student"
    RETIRED = "Retired"
    UNEMPLOYED = "Unemployed"


class Rating(str, Enum):
    """Landlord review / reference quality."""

    EXCELLENT = "Excellent"
    GOOD = "Good"
    AVERAGE = "Average"
    POOR = "Poor"
    UNKNOWN = "Unknown"
    NONE = "None"


class TenantEventType(str, Enum):
    RENT_PAID = "RENT_PAID"
    RENT_LATE = "RENT_LATE"
    RENT_MISSED = "RENT_MISSED"
    DAMAGE = "DAMAGE"
    LEASE_BREAK = "LEASE_BREAK"
    COMPLAINT = "COMPLAINT"
    RENEWAL = "RENEWAL"


class EventSeverity(str, Enum):
    MINOR = "Minor"
    MAJOR = "Major"


class EventCategory(str, Enum):
    ECONOMIC = "Economic"
    SOCIAL = "Social"
    POLITICAL = "Political"
    ENVIRONMENTAL = "Environmental"
    TECHNOLOGICAL = "Technological"


class EventImpactType(str, Enum):
    INTEREST_RATE = "Interest Rate"
    LOAN_APPROVAL = "Loan Approval"
    MAX_LOAN_AMOUNT = "Max Loan Amount"
    TENANT_QUALITY = "Tenant Quality"
    PROPERTY_VALUE = "Property Value"
    AREA_QUALITY = "Area Quality"
    RENOVATION_COST = "Renovation Cost"
    MAINTENANCE_COST = "Maintenance Cost"
    PROPERTY_TAX = "Property Tax"
