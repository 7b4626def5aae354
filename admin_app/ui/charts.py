"""
Chart builders for the analytics, dietary tag and prediction views.

All charts share the same quiet theme (apply_modern_theme) and accept either
DTO lists or DataFrames so pages stay free of plotting details.
"""

from typing import List, Optional

import altair as alt
import pandas as pd

from pricewatch.models import MarketComparison, PricePoint, TagCoverage

COLORS = {
    "primary": "#2563eb",      # Blue
    "target": "#16a34a",       # Green, highlighted market
    "secondary": "#94a3b8",    # Blue-gray
    "warning": "#f59e0b",      # Amber
    "danger": "#ef4444",       # Red
    "text": "#1e293b",         # Dark slate
    "background": "#ffffff",
    "grid": "#f1f5f9",
}

COVERAGE_COLORS = {
    "Excellent": COLORS["target"],
    "Good": COLORS["warning"],
    "Needs Work": COLORS["danger"],
}


def apply_modern_theme(chart: alt.Chart) -> alt.Chart:
    """
    Apply a unified modern theme to an Altair chart.

    Args:
        chart: Altair chart to theme

    Returns:
        Themed chart with consistent styling
    """
    return chart.configure_view(
        strokeWidth=0,
        fill=COLORS["background"],
    ).configure_axis(
        grid=True,
        gridColor=COLORS["grid"],
        gridOpacity=0.6,
        domain=False,
        labelColor=COLORS["text"],
        labelFontSize=11,
        titleColor=COLORS["text"],
        titleFontSize=12,
        titleFontWeight="normal",
        ticks=False,
    ).configure_legend(
        titleFontSize=11,
        labelFontSize=10,
        labelColor=COLORS["text"],
        titleColor=COLORS["text"],
    ).configure(
        padding={"left": 10, "top": 10, "right": 10, "bottom": 10},
        background=COLORS["background"],
    )


def price_history_frame(history: List[PricePoint]) -> pd.DataFrame:
    """Price points as a date-sorted DataFrame with columns date, price."""
    if not history:
        return pd.DataFrame(columns=["date", "price"])
    df = pd.DataFrame([{"date": p.date, "price": p.price} for p in history])
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    return df.dropna(subset=["date"]).sort_values("date")


def build_price_history(history: List[PricePoint], average_price: Optional[float] = None) -> alt.Chart:
    """
    Line chart of a product's price over time in one market.

    Args:
        history: Price points from ProductAnalytics.history
        average_price: Optional horizontal reference line

    Returns:
        Themed line chart
    """
    df = price_history_frame(history)
    if df.empty:
        return apply_modern_theme(alt.Chart(pd.DataFrame()).mark_line())

    line = alt.Chart(df).mark_line(
        point=True,
        stroke=COLORS["primary"],
        strokeWidth=2,
        interpolate="monotone",
    ).encode(
        x=alt.X("date:T", axis=alt.Axis(title=None, format="%b %d", labelAngle=-45)),
        y=alt.Y("price:Q", axis=alt.Axis(title="Price (₱)"), scale=alt.Scale(zero=False)),
        tooltip=[
            alt.Tooltip("date:T", title="Date", format="%b %d, %Y"),
            alt.Tooltip("price:Q", title="Price", format=".2f"),
        ],
    )

    chart = line
    if average_price is not None:
        rule = alt.Chart(pd.DataFrame({"average": [average_price]})).mark_rule(
            strokeDash=[4, 4],
            color=COLORS["secondary"],
        ).encode(y="average:Q")
        chart = line + rule

    return apply_modern_theme(chart.properties(height=320))


def build_market_comparison(comparisons: List[MarketComparison]) -> alt.Chart:
    """
    Horizontal bars of average price per market, target market highlighted.
    """
    if not comparisons:
        return apply_modern_theme(alt.Chart(pd.DataFrame()).mark_bar())

    df = pd.DataFrame([
        {
            "market": c.market_name,
            "average_price": c.average_price,
            "role": "Selected market" if c.is_target_market else "Other markets",
        }
        for c in comparisons
    ]).sort_values("average_price")

    chart = alt.Chart(df).mark_bar(cornerRadius=3).encode(
        x=alt.X("average_price:Q", axis=alt.Axis(title="Average price (₱)")),
        y=alt.Y("market:N", sort=df["market"].tolist(), axis=alt.Axis(title=None)),
        color=alt.Color(
            "role:N",
            scale=alt.Scale(
                domain=["Selected market", "Other markets"],
                range=[COLORS["target"], COLORS["secondary"]],
            ),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("market:N", title="Market"),
            alt.Tooltip("average_price:Q", title="Average", format=".2f"),
        ],
    ).properties(height=max(160, 28 * len(df)))

    return apply_modern_theme(chart)


def build_coverage_bars(coverage: List[TagCoverage]) -> alt.Chart:
    """Tagging coverage percentage per category, colored by coverage status."""
    if not coverage:
        return apply_modern_theme(alt.Chart(pd.DataFrame()).mark_bar())

    df = pd.DataFrame([
        {
            "category": c.category,
            "coverage": c.coverage_percentage / 100.0,
            "status": c.status,
            "tagged": c.tagged_count,
            "total": c.total_count,
        }
        for c in coverage
    ])

    chart = alt.Chart(df).mark_bar(cornerRadius=3).encode(
        x=alt.X("coverage:Q", axis=alt.Axis(title="Coverage", format=".0%"), scale=alt.Scale(domain=[0, 1])),
        y=alt.Y("category:N", sort="-x", axis=alt.Axis(title=None)),
        color=alt.Color(
            "status:N",
            scale=alt.Scale(domain=list(COVERAGE_COLORS.keys()), range=list(COVERAGE_COLORS.values())),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        tooltip=[
            alt.Tooltip("category:N", title="Category"),
            alt.Tooltip("tagged:Q", title="Tagged"),
            alt.Tooltip("total:Q", title="Total"),
            alt.Tooltip("coverage:Q", title="Coverage", format=".0%"),
        ],
    ).properties(height=max(160, 26 * len(df)))

    return apply_modern_theme(chart)


def build_prediction_history(history: dict) -> alt.Chart:
    """
    Historical prices plus forecast points from the prediction debug payload.

    Expects ``regressionInput`` as a list of {date, price} and ``predictions``
    as a list of {date, predictedPrice}. Missing parts are skipped.
    """
    rows = []
    for point in history.get("regressionInput") or []:
        if isinstance(point, dict) and point.get("price") is not None:
            rows.append({"date": point.get("date"), "price": point["price"], "series": "Observed"})
    for point in history.get("predictions") or []:
        if isinstance(point, dict) and point.get("predictedPrice") is not None:
            rows.append({"date": point.get("date"), "price": point["predictedPrice"], "series": "Forecast"})

    df = pd.DataFrame(rows)
    if df.empty:
        return apply_modern_theme(alt.Chart(pd.DataFrame()).mark_line())
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df = df.dropna(subset=["date"])

    chart = alt.Chart(df).mark_line(point=True).encode(
        x=alt.X("date:T", axis=alt.Axis(title=None, format="%b %d")),
        y=alt.Y("price:Q", axis=alt.Axis(title="Price (₱)"), scale=alt.Scale(zero=False)),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(domain=["Observed", "Forecast"], range=[COLORS["primary"], COLORS["warning"]]),
            legend=alt.Legend(title=None, orient="bottom"),
        ),
        strokeDash=alt.StrokeDash(
            "series:N",
            scale=alt.Scale(domain=["Observed", "Forecast"], range=[[1, 0], [4, 4]]),
            legend=None,
        ),
        tooltip=[
            alt.Tooltip("date:T", title="Date", format="%b %d, %Y"),
            alt.Tooltip("series:N", title="Series"),
            alt.Tooltip("price:Q", title="Price", format=".2f"),
        ],
    ).properties(height=280)

    return apply_modern_theme(chart)
