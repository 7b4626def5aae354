"""
PriceWatch Admin - Streamlit Main Entry Point.

This is the dashboard entry point and the Overview page. It sets up logging
and page configuration, guards access, and shows headline KPIs from the market,
product and dietary tag stats plus recent admin activity from the audit log.

Note: Multi-page routing is handled automatically by Streamlit via the `pages/`
folder. Files in `pages/` starting with numbered prefixes (e.g. `03_🏪_Markets.py`)
appear as pages in the sidebar navigation.
"""

import sys
from pathlib import Path

# Ensure the admin_app directory is in the Python path
admin_app_dir = Path(__file__).parent
if str(admin_app_dir) not in sys.path:
    sys.path.insert(0, str(admin_app_dir))

# Add project root to path so we can import pricewatch
project_root = admin_app_dir.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

# Import config early to load .env before any other code reads the environment
from pricewatch.config import setup_logging

setup_logging()

import pandas as pd
import streamlit as st

from pricewatch.events import read_recent_events
from pricewatch.exceptions import ApiError
from pricewatch.formatting import format_datetime, title_case
from ui.feedback import show_api_error, show_empty_state
from ui.layout import card, kpi_row, page_header, render_sidebar, section
from ui.styles import load_global_styles
from utils.dietary_tag_api import fetch_dietary_tag_stats
from utils.market_api import fetch_market_stats
from utils.products_api import fetch_product_stats
from utils.session import require_admin

# Page configuration - must be called before any other Streamlit commands
st.set_page_config(
    page_title="PriceWatch Admin",
    page_icon="🥬",
    layout="wide",
    initial_sidebar_state="expanded",
)

load_global_styles()
require_admin()
render_sidebar()


@st.cache_data(ttl=60)
def _load_market_stats():
    return fetch_market_stats()


@st.cache_data(ttl=60)
def _load_product_stats():
    return fetch_product_stats()


@st.cache_data(ttl=60)
def _load_tag_stats():
    return fetch_dietary_tag_stats()


page_header("Overview", subtitle="Market prices, products and dietary tags at a glance.")

try:
    market_stats = _load_market_stats()
    product_stats = _load_product_stats()
    tag_stats = _load_tag_stats()
except ApiError as e:
    show_api_error(e, "Failed to load dashboard stats. Please try again.")
    st.stop()

section("Markets")
kpi_row([
    {"label": "Total markets", "value": market_stats.total_markets, "icon": "🏪"},
    {"label": "Active", "value": market_stats.active_markets, "icon": "🟢"},
    {"label": "Supermarkets", "value": market_stats.total_super_markets, "icon": "🛒"},
    {"label": "Wet markets", "value": market_stats.total_wet_markets, "icon": "🐟"},
])

section("Products")
kpi_row([
    {"label": "Total products", "value": product_stats.total_products, "icon": "📦"},
    {"label": "Active", "value": product_stats.active_products, "icon": "✅"},
    {"label": "Archived", "value": product_stats.archived_products, "icon": "🗄"},
    {"label": "Dietary tag links", "value": product_stats.total_product_dietary_tags, "icon": "🏷"},
])

section("Dietary tags")
tagged_pct = (
    f"{tag_stats.tagged_products / tag_stats.total_products:.0%}"
    if tag_stats.total_products
    else "—"
)
kpi_row([
    {"label": "Tagged products", "value": tag_stats.tagged_products, "icon": "🏷"},
    {"label": "Untagged products", "value": tag_stats.untagged_products, "icon": "❔"},
    {"label": "Tag options", "value": tag_stats.total_dietary_option, "icon": "📋"},
    {"label": "Coverage", "value": tagged_pct, "icon": "📊"},
])

st.divider()

section("Recent activity", caption="Latest changes made from this dashboard.")
recent = read_recent_events(limit=15)
if not recent:
    show_empty_state("No admin activity yet", subtitle="Changes made from the dashboard will appear here.")
else:
    with card():
        activity_df = pd.DataFrame([
            {
                "When": format_datetime(record.get("ts")),
                "Who": record.get("user") or "—",
                "Action": title_case(record.get("event")),
                "Details": ", ".join(f"{k}={v}" for k, v in (record.get("payload") or {}).items()),
            }
            for record in recent
        ])
        st.dataframe(activity_df, use_container_width=True, hide_index=True)
