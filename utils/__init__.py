"""Утилиты Weather Alerts Widget.

Содержит вспомогательные функции и классы
для работы приложения.
"""

from .metrics import MetricsCollector, metrics_collector
from .logger import setup_logging, get_logger, log_api_request

__all__ = [
    "MetricsCollector",
    "metrics_collector",
    "setup_logging",
    "get_logger",
    "log_api_request"
]
