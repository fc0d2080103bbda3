"""Слой отображения Weather Alerts Widget.

Содержит протокол поверхности отображения, страницу виджета
и функции презентера.
"""

from .surface import RenderingSurface
from .page import Element, Page, PageSurface
from .presenter import format_summary, render_success, render_error, clear_error, clear_input

__all__ = [
    "RenderingSurface",
    "Element",
    "Page",
    "PageSurface",
    "format_summary",
    "render_success",
    "render_error",
    "clear_error",
    "clear_input"
]
