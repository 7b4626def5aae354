"""
Client-side filtering for admin tables.

Every table in the dashboard fetches a page from the backend and then narrows
that page in the browser session. The predicates here implement that second
step. Rules shared by all of them:

- Matching is case-insensitive and the search term is trimmed.
- An empty/None search term matches everything.
- For select-style filters, "" / None / "all" means "no filter".
- Input order is preserved.

Key functions:
- filter_tagged_products / filter_dietary_tags / filter_quality_issues / filter_coverage
- filter_markets / filter_products / filter_archived_products / filter_product_markets
- filter_price_reports: status + inclusive ISO date range
- prioritized_search: "starts with" matches first, then "contains" matches
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence, TypeVar

from pricewatch.models import (
    ArchivedDietaryTag,
    ArchivedMarket,
    ArchivedProduct,
    DietaryTag,
    DiscoveryProduct,
    Market,
    PriceReport,
    Product,
    ProductMarket,
    ProductWithTags,
    QualityIssue,
    TagCoverage,
)

T = TypeVar("T")

ALL = "all"


def normalize_term(term: Optional[str]) -> str:
    """Lowercase and trim a search term; None becomes ""."""
    return (term or "").strip().lower()


def is_unset(value: Optional[str]) -> bool:
    """True when a select filter means "no filter" ("", None or "all")."""
    return value is None or value == "" or value == ALL


def starts_with(value: Optional[str], term: Optional[str]) -> bool:
    """
    Case-insensitive prefix match.

    An empty term matches everything; a missing value never matches a
    non-empty term.
    """
    needle = normalize_term(term)
    if not needle:
        return True
    if not value:
        return False
    return value.strip().lower().startswith(needle)


def contains(value: Optional[str], term: Optional[str]) -> bool:
    """Case-insensitive substring match with the same empty-term rules as starts_with."""
    needle = normalize_term(term)
    if not needle:
        return True
    if not value:
        return False
    return needle in value.strip().lower()


def _matches_select(value: Optional[str], selected: Optional[str]) -> bool:
    return is_unset(selected) or value == selected


def _apply(items: Iterable[T], predicate: Callable[[T], bool]) -> List[T]:
    return [item for item in items if predicate(item)]


# ---------------------------------------------------------------------------
# Dietary tags
# ---------------------------------------------------------------------------

def filter_tagged_products(
    products: Iterable[ProductWithTags],
    search: Optional[str] = None,
    category: Optional[str] = None,
    status: Optional[str] = None,
) -> List[ProductWithTags]:
    """
    Filter products shown in the tagging table.

    Args:
        search: prefix of product_name or local_name
        category: exact category
        status: "tagged" (at least one tag) or "untagged" (no tags)
    """
    def predicate(product: ProductWithTags) -> bool:
        if normalize_term(search) and not (
            starts_with(product.product_name, search) or starts_with(product.local_name, search)
        ):
            return False
        if not _matches_select(product.category, category):
            return False
        if status == "tagged" and not product.is_tagged:
            return False
        if status == "untagged" and product.is_tagged:
            return False
        return True

    return _apply(products, predicate)


def filter_dietary_tags(tags: Iterable[DietaryTag], search: Optional[str] = None) -> List[DietaryTag]:
    """Filter tag options by prefix of tag_name or description."""
    if not normalize_term(search):
        return list(tags)
    return _apply(
        tags,
        lambda tag: starts_with(tag.tag_name, search) or starts_with(tag.description, search),
    )


def filter_quality_issues(
    issues: Iterable[QualityIssue],
    search: Optional[str] = None,
    severity: Optional[str] = None,
    issue_type: Optional[str] = None,
) -> List[QualityIssue]:
    """Filter quality-scan results by prefix of product_name/category, severity and issue type."""
    def predicate(issue: QualityIssue) -> bool:
        if normalize_term(search) and not (
            starts_with(issue.product_name, search) or starts_with(issue.category, search)
        ):
            return False
        return _matches_select(issue.severity, severity) and _matches_select(issue.issue_type, issue_type)

    return _apply(issues, predicate)


def filter_coverage(
    coverage: Iterable[TagCoverage],
    search: Optional[str] = None,
    status: Optional[str] = None,
) -> List[TagCoverage]:
    """Filter per-category coverage rows by category substring and status."""
    return _apply(
        coverage,
        lambda item: contains(item.category, search) and _matches_select(item.status, status),
    )


# ---------------------------------------------------------------------------
# Markets and products
# ---------------------------------------------------------------------------

def filter_markets(
    markets: Iterable[Market],
    search: Optional[str] = None,
    market_type: Optional[str] = None,
    status: Optional[str] = None,
) -> List[Market]:
    """Filter markets by name substring, market type and ACTIVE/INACTIVE status."""
    def predicate(market: Market) -> bool:
        if not contains(market.market_name, search):
            return False
        if not _matches_select(market.market_type, market_type):
            return False
        return _matches_select(market.market_status, status)

    return _apply(markets, predicate)


def filter_products(
    products: Iterable[Product],
    search: Optional[str] = None,
    category: Optional[str] = None,
    origin: Optional[str] = None,
) -> List[Product]:
    """Filter the product catalog by name prefix, category and origin."""
    def predicate(product: Product) -> bool:
        if not starts_with(product.product_name, search):
            return False
        return _matches_select(product.category, category) and _matches_select(product.origin, origin)

    return _apply(products, predicate)


def filter_archived_products(
    products: Iterable[ArchivedProduct],
    search: Optional[str] = None,
) -> List[ArchivedProduct]:
    return _apply(products, lambda product: starts_with(product.product_name, search))


def filter_archived_markets(
    markets: Iterable[ArchivedMarket],
    search: Optional[str] = None,
) -> List[ArchivedMarket]:
    return _apply(markets, lambda market: contains(market.market_location, search))


def filter_archived_tags(
    tags: Iterable[ArchivedDietaryTag],
    search: Optional[str] = None,
) -> List[ArchivedDietaryTag]:
    return _apply(tags, lambda tag: starts_with(tag.tag_name, search))


def filter_product_markets(
    markets: Iterable[ProductMarket],
    search: Optional[str] = None,
    market_type: Optional[str] = None,
) -> List[ProductMarket]:
    """Filter the markets that carry a product (product markets dialog)."""
    return _apply(
        markets,
        lambda market: contains(market.market_name, search) and _matches_select(market.market_type, market_type),
    )


def filter_analytics_products(
    products: Iterable[DiscoveryProduct],
    search: Optional[str] = None,
) -> List[DiscoveryProduct]:
    return _apply(products, lambda product: contains(product.product_name, search))


# ---------------------------------------------------------------------------
# Price reports
# ---------------------------------------------------------------------------

def filter_price_reports(
    reports: Iterable[PriceReport],
    status: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None,
) -> List[PriceReport]:
    """
    Filter price report runs by status and an inclusive date range.

    Dates are ISO strings compared lexicographically. The upper bound is
    compared against the same-length prefix, so "2026-01-31T08:00:00" is still
    within a date_to of "2026-01-31".
    """
    def predicate(report: PriceReport) -> bool:
        if not _matches_select(report.status, status):
            return False
        if date_from and report.date_reported < date_from:
            return False
        if date_to and report.date_reported[:len(date_to)] > date_to:
            return False
        return True

    return _apply(reports, predicate)


# ---------------------------------------------------------------------------
# Search helpers
# ---------------------------------------------------------------------------

def prioritized_search(
    items: Iterable[T],
    term: Optional[str],
    keys: Sequence[Callable[[T], Optional[str]]],
) -> List[T]:
    """
    Rank items for a free-text search.

    Items where any key starts with the term come first, followed by items
    where any key only contains it. Order within each group is preserved.
    Items that match neither are dropped. An empty term returns every item.

    Args:
        items: Items to search
        term: Search text
        keys: Callables extracting the searchable strings from an item

    Example:
        >>> prioritized_search(preds, "ri", [lambda p: p.product_name, lambda p: p.product_code])
    """
    items = list(items)
    needle = normalize_term(term)
    if not needle:
        return items

    prefix_matches: List[T] = []
    substring_matches: List[T] = []
    for item in items:
        values = [(key(item) or "").lower() for key in keys]
        if any(v.startswith(needle) for v in values):
            prefix_matches.append(item)
        elif any(needle in v for v in values):
            substring_matches.append(item)
    return prefix_matches + substring_matches


def distinct_values(items: Iterable[Any], attr: str) -> List[Any]:
    """
    Distinct non-empty attribute values in first-seen order.

    Used to build category/origin/market-type select options from the rows
    currently loaded.
    """
    seen = []
    for item in items:
        value = getattr(item, attr, None)
        if value and value not in seen:
            seen.append(value)
    return seen
