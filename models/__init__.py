"""Модели данных Weather Alerts Widget.

Содержит Pydantic модели для валидации ответа API
и состояния интерфейса виджета.
"""

from .alert import (
    AlertProperties,
    Alert,
    AlertResponse,
    WidgetState,
    ApiError,
    HealthCheckResponse
)

__all__ = [
    "AlertProperties",
    "Alert",
    "AlertResponse",
    "WidgetState",
    "ApiError",
    "HealthCheckResponse"
]
