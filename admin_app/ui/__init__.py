"""
UI building blocks for the admin dashboard.

- styles: global CSS
- layout: page header, sections, KPI rows, sidebar and pagination controls
- feedback: error/empty/loading states
- charts: altair chart builders
"""

from ui.styles import load_global_styles

__all__ = ["load_global_styles"]
