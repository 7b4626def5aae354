"""
Helpers for the price prediction views.

Manual overrides let an admin force a trend for product/market pairs; the
dashboard previews the resulting price before submitting the override.
"""

from typing import Dict, List

from pricewatch.models import ProductPrediction

NO_OVERRIDE = "NO_OVERRIDE"
STABILIZE = "STABILIZE"

# Override type -> multiplier applied to the current price
OVERRIDE_MULTIPLIERS: Dict[str, float] = {
    NO_OVERRIDE: 1.0,
    STABILIZE: 1.0,
    "+10% INCREASE": 1.10,
    "+20% INCREASE": 1.20,
    "+30% INCREASE": 1.30,
    "+50% INCREASE": 1.50,
    "-10% DECREASE": 0.90,
    "-20% DECREASE": 0.80,
    "-30% DECREASE": 0.70,
    "-50% DECREASE": 0.50,
}

OVERRIDE_TYPES: List[str] = list(OVERRIDE_MULTIPLIERS.keys())

# Price change magnitudes (percent) for the inspection banner
EXTREME_CHANGE_PERCENT = 30.0

SORT_FIELDS = ["productName", "category", "averageCurrentPrice", "anomalyCount"]
SORT_DIRECTIONS = ["ASC", "DESC"]


def override_price(current_price: float, override_type: str) -> float:
    """Preview price for an override type; unknown types leave the price unchanged."""
    return current_price * OVERRIDE_MULTIPLIERS.get(override_type, 1.0)


def change_severity(change_percent: float) -> str:
    """Label a detected price change for the inspection banner."""
    return "Extreme" if abs(change_percent) > EXTREME_CHANGE_PERCENT else "Significant"


def anomaly_pairs(predictions: List[ProductPrediction]) -> List[Dict[str, int]]:
    """All (product, market) pairs flagged ANOMALY, as override request pairs."""
    return [
        {"productId": prediction.product_id, "marketId": mp.market_id}
        for prediction in predictions
        for mp in prediction.anomalies
    ]
