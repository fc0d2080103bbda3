"""Модуль конфигурации Weather Alerts Widget.

Содержит настройки приложения и константы.
"""

from .settings import settings
from . import widget

__all__ = ["settings", "widget"]
