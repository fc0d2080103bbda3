"""Сервисы Weather Alerts Widget.

Содержит валидацию ввода, клиент API api.weather.gov
и обработчик действия виджета.
"""

from .exceptions import WidgetError, ValidationError, HttpError, ParseError, NetworkError
from .validator import validate_region_code
from .alerts_api import WeatherAlertsService
from .widget import AlertsWidget

__all__ = [
    "WidgetError",
    "ValidationError",
    "HttpError",
    "ParseError",
    "NetworkError",
    "validate_region_code",
    "WeatherAlertsService",
    "AlertsWidget"
]
