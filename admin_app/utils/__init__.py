"""
Utility modules for the Streamlit admin dashboard.

This package contains:
- api_client: Backend HTTP transport (token injection, error mapping)
- *_api: One module per backend resource (dietary tags, markets, products, ...)
- session: Authentication session and admin page guard
- table_state: Session state helpers for paginated, filterable tables
"""
