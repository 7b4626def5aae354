"""
DTO models mirrored from the price-monitoring backend.

All backend payloads are camelCase JSON. Every model here uses snake_case
attribute names with camelCase aliases, so responses can be validated directly
(``Market.model_validate(response_json)``) and request bodies can be produced
with ``to_payload()``.

# NOTE: These are plain transfer objects. The client enforces nothing beyond
    presence of required fields; status/type/severity values are kept as
    strings so a new backend enum value never breaks a table render.
"""

from typing import Any, Dict, Generic, List, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

T = TypeVar("T")

# Market enums
MARKET_TYPE_WET = "WET_MARKET"
MARKET_TYPE_SUPERMARKET = "SUPERMARKET"
MARKET_TYPES = [MARKET_TYPE_WET, MARKET_TYPE_SUPERMARKET]

STATUS_ACTIVE = "ACTIVE"
STATUS_INACTIVE = "INACTIVE"
MARKET_STATUSES = [STATUS_ACTIVE, STATUS_INACTIVE]

# Product lifecycle statuses
STATUS_ARCHIVED = "ARCHIVED"
STATUS_DEACTIVATED = "DEACTIVATED"
STATUS_UNRECOGNIZED = "UNRECOGNIZED"
PRODUCT_STATUSES = [STATUS_ACTIVE, STATUS_ARCHIVED, STATUS_DEACTIVATED]

# Dietary tag quality control
SEVERITY_LEVELS = ["HIGH", "MEDIUM", "LOW"]
ISSUE_TYPES = ["Untagged", "Duplicate", "Missing Info"]
COVERAGE_STATUSES = ["Excellent", "Good", "Needs Work"]
TAGGING_STATUSES = ["tagged", "untagged"]

# Price report runs
REPORT_STATUSES = ["COMPLETED", "FAILED", "PROCESSING", "PENDING"]


class DTO(BaseModel):
    """Base model: camelCase aliases, lenient about extra fields."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_payload(self, exclude_none: bool = False) -> Dict[str, Any]:
        """Serialize to the camelCase JSON body the backend expects."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=exclude_none)


class PageInfo(DTO):
    size: int = 0
    number: int = 0
    total_elements: int = 0
    total_pages: int = 0


class Page(DTO, Generic[T]):
    """
    Spring-style paginated response: ``{"content": [...], "page": {...}}``.

    ``page`` is optional because some endpoints omit it on empty results.
    """
    content: List[T] = Field(default_factory=list)
    page: Optional[PageInfo] = None


# ---------------------------------------------------------------------------
# Dietary tags
# ---------------------------------------------------------------------------

class DietaryTagStats(DTO):
    total_products: int = 0
    tagged_products: int = 0
    untagged_products: int = 0
    total_dietary_option: int = 0


class DietaryTag(DTO):
    id: int
    tag_name: str
    description: Optional[str] = None
    updated_at: Optional[str] = None


class ProductDietaryTag(DTO):
    tag_id: int
    tag_name: str


class ProductWithTags(DTO):
    product_id: int
    product_name: str
    category: str = ""
    local_name: Optional[str] = None
    tags: List[ProductDietaryTag] = Field(default_factory=list)

    @property
    def tag_ids(self) -> List[int]:
        return [tag.tag_id for tag in self.tags]

    @property
    def is_tagged(self) -> bool:
        return len(self.tags) > 0


class QualityIssue(DTO):
    product_id: int
    product_name: str
    category: str = ""
    issue_type: str
    severity: str
    description: str = ""
    suggested_fix: str = ""
    current_tags: List[str] = Field(default_factory=list)
    last_updated: Optional[str] = None


class TagCoverage(DTO):
    category: str
    tagged_count: int = 0
    total_count: int = 0
    coverage_percentage: float = 0.0
    status: str = ""


# ---------------------------------------------------------------------------
# Markets
# ---------------------------------------------------------------------------

class MarketStats(DTO):
    total_markets: int = 0
    active_markets: int = 0
    total_super_markets: int = 0
    total_wet_markets: int = 0


class Market(DTO):
    """
    Market row as returned by ``/displayMarkets`` and ``/view/{id}``.

    Some endpoints send ``type``/``status``/``marketLocation`` instead of
    ``marketType``/``marketStatus``/``marketName``; both spellings are accepted.
    """
    id: int
    market_name: str = Field(
        validation_alias=AliasChoices("marketName", "marketLocation", "market_name"),
    )
    market_type: str = Field(
        validation_alias=AliasChoices("marketType", "type", "market_type"),
    )
    market_status: str = Field(
        default=STATUS_ACTIVE,
        validation_alias=AliasChoices("marketStatus", "status", "market_status"),
    )
    total_products_available: int = 0
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    total_products: Optional[int] = None
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    ratings: Optional[float] = None
    description: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def has_location(self) -> bool:
        return self.latitude is not None and self.longitude is not None


class MarketUpdate(DTO):
    """Body of ``PUT /api/v1/markets/{id}``."""
    market_location: str
    type: str
    latitude: float = 0.0
    longitude: float = 0.0
    ratings: float = 0.0
    opening_time: Optional[str] = None
    closing_time: Optional[str] = None
    description: Optional[str] = None


# ---------------------------------------------------------------------------
# Products
# ---------------------------------------------------------------------------

class ProductStats(DTO):
    total_products: int = 0
    active_products: int = 0
    archived_products: int = 0
    total_product_dietary_tags: int = 0


class Product(DTO):
    id: int
    product_name: str
    category: str = ""
    origin: str = ""
    local_name: Optional[str] = None
    unit: str = ""
    status: str = STATUS_ACTIVE
    price: float = 0.0
    previous_price: float = 0.0
    total_markets: int = 0
    total_dietary_tags: int = 0
    last_updated: Optional[str] = None

    @property
    def price_change(self) -> float:
        return self.price - self.previous_price


class NewProduct(DTO):
    """A scraped product awaiting approval (a "newcomer")."""
    id: int
    product_name: str
    category: str = ""
    origin: str = ""
    local_name: Optional[str] = None
    unit: str = ""
    price: float = 0.0
    total_markets: int = 0
    detected_date: Optional[str] = None


class ProductUpdate(DTO):
    local_name: Optional[str] = None
    price: float
    unit: str
    status: str


class NewcomerUpdate(DTO):
    product_name: str
    category: str
    local_name: Optional[str] = None
    origin: str


class ProductMarket(DTO):
    """One entry of ``marketDetails`` for a product."""
    market_id: Optional[int] = Field(
        default=None,
        validation_alias=AliasChoices("marketId", "id", "market_id"),
    )
    market_name: Optional[str] = None
    market_type: Optional[str] = None
    price: Optional[float] = None
    last_updated: Optional[str] = None


# ---------------------------------------------------------------------------
# Archive
# ---------------------------------------------------------------------------

class ArchiveStats(DTO):
    total_archived: int = 0
    new_this_month: int = 0
    awaiting_review: int = 0


class ArchivedProduct(DTO):
    id: int
    product_name: str
    category: str = ""
    last_price: float = 0.0
    unit: str = ""
    origin: str = ""
    archived_date: Optional[str] = None


class MarketArchiveStats(DTO):
    total_archive: int = 0
    archive_this_month: int = 0
    high_rated: int = 0


class ArchivedMarket(DTO):
    id: int
    market_location: str
    type: str = ""
    ratings: float = 0.0
    archived_date: Optional[str] = None


class DietaryTagArchiveStats(DTO):
    total_archived: int = 0
    archived_this_month: int = 0
    unused_tags_count: int = 0


class ArchivedDietaryTag(DTO):
    id: int
    tag_name: str
    description: str = ""
    archived_at: Optional[str] = None


# ---------------------------------------------------------------------------
# Price reports
# ---------------------------------------------------------------------------

class PriceReport(DTO):
    id: int
    date_reported: str
    total_products: int = 0
    total_markets: int = 0
    duration_ms: int = 0
    url: Optional[str] = None
    status: str = ""


# ---------------------------------------------------------------------------
# Analytics
# ---------------------------------------------------------------------------

class DiscoveryMarket(DTO):
    id: int
    market_name: str
    type: str = ""


class DiscoveryProduct(DTO):
    id: int
    product_name: str
    category: str = ""


class DiscoveryData(DTO):
    markets: List[DiscoveryMarket] = Field(default_factory=list)
    products: List[DiscoveryProduct] = Field(default_factory=list)


class PricePoint(DTO):
    date: str
    price: float


class ProductAnalytics(DTO):
    product_name: str
    market_name: str
    min_price: float = 0.0
    max_price: float = 0.0
    average_price: float = 0.0
    volatility: str = ""
    history: List[PricePoint] = Field(default_factory=list)


class MarketComparison(DTO):
    market_name: str
    average_price: float = 0.0
    is_target_market: bool = False


# ---------------------------------------------------------------------------
# Predictions
# ---------------------------------------------------------------------------

class PredictionDashboardStats(DTO):
    total_products: int = 0
    active_markets: int = 0
    model_accuracy: float = 0.0
    anomalies: int = 0
    total_predictions: int = 0
    last_updated: Optional[str] = None


class MarketInfo(DTO):
    id: int
    name: str
    location: str = ""
    product_count: int = 0
    prediction_count: int = 0
    anomaly_count: int = 0


class PriceCalibration(DTO):
    """Market-centric prediction row (one product in one market)."""
    product_id: int
    product_name: str
    market_id: int
    market_name: str
    current_price: float = 0.0
    forecast_price: float = 0.0
    trend_percentage: float = 0.0
    confidence_score: float = 0.0
    status: str = ""


class MarketPrediction(DTO):
    market_id: int
    market_name: str
    market_location: str = ""
    current_price: float = 0.0
    forecast_price: float = 0.0
    trend_percentage: float = 0.0
    confidence_score: float = 0.0
    status: str = ""
    data_points: int = 0


class ProductPrediction(DTO):
    """Product-centric prediction: one product across every market."""
    product_id: int
    product_name: str
    product_code: str = ""
    category: str = ""
    market_predictions: List[MarketPrediction] = Field(default_factory=list)
    average_current_price: float = 0.0
    average_forecast_price: float = 0.0
    max_price_difference: float = 0.0
    most_expensive_market: str = ""
    cheapest_market: str = ""
    total_markets: int = 0
    anomaly_count: int = 0

    @property
    def anomalies(self) -> List[MarketPrediction]:
        return [mp for mp in self.market_predictions if mp.status.upper() == "ANOMALY"]


class PredictionPair(DTO):
    product_id: int
    market_id: int


class TrendOverride(DTO):
    pairs: List[PredictionPair]
    force_trend: str
    reason: str = ""


class BulkPredictionStatus(DTO):
    status: str = ""
    message: str = ""
    timestamp: Optional[int] = None


# ---------------------------------------------------------------------------
# Authentication
# ---------------------------------------------------------------------------

class TokenData(DTO):
    id: Optional[str] = None
    role: Optional[str] = None
    email: Optional[str] = None


class AuthSession(DTO):
    """What the dashboard keeps per browser session after sign-in."""
    token: Optional[str] = None
    user_id: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("userId", "id", "user_id"),
    )
    role: Optional[str] = None
    email: Optional[str] = None
    provider_id: Optional[str] = None

    @field_validator("user_id", "provider_id", mode="before")
    @classmethod
    def _ids_as_text(cls, value: Any) -> Any:
        # backend sends numeric ids
        return str(value) if isinstance(value, int) else value

    @property
    def is_admin(self) -> bool:
        return (self.role or "").upper() == "ADMIN"
