"""
Presentation: pure mapping from session state to what the page shows.
"""
from .views import View, ViewKind, render, view_kind
from .formatter import format_plant_details

__all__ = ["View", "ViewKind", "render", "view_kind", "format_plant_details"]
