"""
Global CSS Styling for PriceWatch Admin.

This module provides load_global_styles() to inject consistent styling across
all pages: typography, compact tables, status badges and card layouts.
"""

import streamlit as st


def load_global_styles() -> None:
    """
    Inject global CSS styles for the admin dashboard.

    This function:
    - Imports Google Fonts (Inter) for dense, readable tables
    - Sets global styles for headings, buttons, and cards
    - Defines the status badge colors used by ui.layout.status_badge
    """
    css = """
    <style>
        @import url('https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap');

        html, body, [class*="css"] {
            font-family: 'Inter', sans-serif !important;
        }

        h1, h2, h3, h4, h5, h6 {
            font-weight: 600 !important;
            letter-spacing: 0.01em !important;
        }

        h1 {
            font-size: 2rem !important;
            margin-bottom: 0.5rem !important;
        }

        h2 {
            font-size: 1.5rem !important;
            margin-top: 0.5rem !important;
            margin-bottom: 0.5rem !important;
        }

        hr {
            margin-top: 1rem !important;
            margin-bottom: 1rem !important;
        }

        .stButton > button {
            border-radius: 8px !important;
            font-weight: 500 !important;
            padding: 0.4rem 1rem !important;
        }

        .main .block-container {
            max-width: 1400px !important;
            padding-top: 1.5rem !important;
            padding-bottom: 2.5rem !important;
        }

        /* Base card */
        .pw-card {
            border-radius: 10px !important;
            padding: 1rem 1.25rem !important;
            background-color: #ffffff !important;
            border: 1px solid rgba(15, 23, 42, 0.08) !important;
            margin-bottom: 1rem !important;
        }

        [data-testid="stMetric"] {
            background: #ffffff;
            border: 1px solid rgba(15, 23, 42, 0.08);
            border-radius: 10px;
            padding: 0.75rem 1rem !important;
        }

        /* Page header */
        .pw-page-header {
            margin-bottom: 1.25rem !important;
        }

        .pw-page-header .subtitle {
            color: #64748b !important;
            font-size: 0.95rem !important;
        }

        /* Section */
        .pw-section {
            margin-bottom: 1rem !important;
        }

        .pw-section-caption {
            color: #64748b !important;
            font-size: 0.9rem !important;
            margin-bottom: 0.75rem !important;
        }

        /* Status badges */
        .pw-badge {
            display: inline-block;
            padding: 0.15rem 0.6rem;
            border-radius: 999px;
            font-size: 0.75rem;
            font-weight: 600;
        }

        .pw-badge--green  { background: #dcfce7; color: #166534; }
        .pw-badge--red    { background: #fee2e2; color: #991b1b; }
        .pw-badge--yellow { background: #fef9c3; color: #854d0e; }
        .pw-badge--blue   { background: #dbeafe; color: #1e40af; }
        .pw-badge--gray   { background: #f1f5f9; color: #475569; }

        /* Pagination footer */
        .pw-pager-caption {
            color: #64748b;
            font-size: 0.85rem;
            padding-top: 0.5rem;
        }
    </style>
    """
    st.markdown(css, unsafe_allow_html=True)
