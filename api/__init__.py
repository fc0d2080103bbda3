"""API роутеры Weather Alerts Widget.

Содержит FastAPI роутеры для страницы виджета, JSON эндпоинтов
и мониторинга.
"""

from .alerts import alerts_router, limiter, rate_limit_handler
from .monitoring import monitoring_router
from .page import page_router

__all__ = ["alerts_router", "monitoring_router", "page_router", "limiter", "rate_limit_handler"]
