"""Property model and its nested attribute groups."""

from dataclasses import dataclass, field
from datetime import date

from estate_sim.models.enums import (
    IntendedPurpose,
    Location,
    NeighborhoodQuality,
    PropertyType,
    RenovationPotential,
    ViewQuality,
)
from estate_sim.models.tenant import LeaseApplication, Tenant, TenantEvent

PLAYER = "Player"


@dataclass
class Amenities:
    """Nearby amenity scores, each 0-5."""

    schools: float
    parks: float
    shopping: float
    transportation: float
    healthcare: float

    def average(self) -> float:
        scores = [self.schools, self.parks, self.shopping, self.transportation, self.healthcare]
        return sum(scores) / len(scores)


@dataclass
class SpecialFeatures:
    """Feature flags; each adds a fixed bonus to the valuation."""

    swimming_pool: bool = False
    garden: bool = False
    rooftop_terrace: bool = False
    balcony: bool = False
    fireplace: bool = False
    home_office: bool = False
    garage: bool = False
    outdoor_spaces: bool = False
    smart_home: bool = False
    security_system: bool = False


@dataclass
class EconomicIndicators:
    """Local economy around the property."""

    unemployment_rate: float  # percentage
    job_growth: float  # percentage
    population: int
    median_income: int


@dataclass
class MarketTrends:
    """Comparative market statistics at listing time."""

    historical_appreciation: float  # percentage per year
    property_supply: int  # similar unowned listings
    average_days_on_market: int
    seasonality: float  # 0.9-1.1


@dataclass
class PropertyExtras:
    """Extended attributes accepted by the valuation model."""

    neighborhood_quality: NeighborhoodQuality | None = None
    amenities: Amenities | None = None
    special_features: SpecialFeatures | None = None
    view_quality: ViewQuality | None = None
    lot_size: int | None = None
    economic_indicators: EconomicIndicators | None = None
    renovation_potential: RenovationPotential | None = None
    market_trends: MarketTrends | None = None


@dataclass
class Property:
    """A listed or player-owned property."""

    property_id: int
    address: str
    adjective: str
    description: str
    property_type: PropertyType
    location: Location
    size: int  # square meters
    rooms: int | None  # None iff LAND
    building_date: date
    intended_purpose: IntendedPurpose
    neighborhood_quality: NeighborhoodQuality
    view_quality: ViewQuality
    amenities: Amenities
    special_features: SpecialFeatures
    renovation_potential: RenovationPotential
    economic_indicators: EconomicIndicators
    market_trends: MarketTrends
    value: int
    market_price: int
    renovation_bonus_percentage: int  # 0-100
    maintenance_costs: int  # monthly
    rent_price: int  # monthly
    property_tax: int  # monthly
    listed_date: date
    lot_size: int | None = None
    time_on_market: int = 0  # days
    is_new: bool = True
    owner: str | None = None
    purchase_date: date | None = None
    current_tenant: Tenant | None = None
    lease_start: date | None = None
    lease_length: int | None = None  # months
    tenant_history: list[Tenant] = field(default_factory=list)
    tenant_events: list[TenantEvent] = field(default_factory=list)
    lease_applications: list[LeaseApplication] = field(default_factory=list)

    @property
    def is_rented(self) -> bool:
        return self.current_tenant is not None

    @property
    def is_owned(self) -> bool:
        return self.owner == PLAYER

    @property
    def rentee(self) -> str | None:
        return self.current_tenant.name if self.current_tenant else None

    def extras(self) -> PropertyExtras:
        """Extended attributes in the shape the valuation model takes."""
        return PropertyExtras(
            neighborhood_quality=self.neighborhood_quality,
            amenities=self.amenities,
            special_features=self.special_features,
            view_quality=self.view_quality,
            lot_size=self.lot_size,
            economic_indicators=self.economic_indicators,
            renovation_potential=self.renovation_potential,
            market_trends=self.market_trends,
        )
