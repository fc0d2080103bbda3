"""Конфигурация приложения Weather Alerts Widget.

Модуль содержит настройки приложения, переменные окружения
и конфигурацию различных сервисов.
"""

import os
from dotenv import load_dotenv
load_dotenv()

# Уровни loguru
LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings:
    """Класс настроек приложения с валидацией.

    Загружает переменные окружения и предоставляет
    значения по умолчанию с валидацией.
    """

    def __init__(self):
        """Инициализация настроек из переменных окружения."""
        # Настройки API api.weather.gov
        self.alerts_api_base_url = os.getenv(
            "WEATHER_API_URL",
            "https://api.weather.gov"
        ).rstrip("/")
        self.user_agent = os.getenv("WEATHER_API_USER_AGENT", "WeatherAlertsWidget/1.0.0")

        # Настройки мониторинга
        self.sentry_dsn = os.getenv("SENTRY_DSN")

        # Настройки rate limiting
        self.rate_limit = os.getenv("RATE_LIMIT", "100/10minutes")

        # Настройки порта
        self.port = int(os.getenv("PORT", "8500"))

        # Настройки логирования
        self.log_level = os.getenv("LOG_LEVEL", "INFO").strip().upper()
        self.log_file = os.getenv("LOG_FILE", "./logs/today.log").strip() or None

        # CORS настройки
        cors_origins_env = os.getenv("CORS_ORIGINS", "*")
        self.cors_origins = [origin.strip() for origin in cors_origins_env.split(",")]

        # Валидация настроек
        self._validate_settings()

    def _validate_settings(self):
        """Провести валидацию настроек."""
        if not self.alerts_api_base_url.startswith(("http://", "https://")):
            raise ValueError('WEATHER_API_URL должен начинаться с http:// или https://')

        if not self.user_agent.strip():
            raise ValueError('WEATHER_API_USER_AGENT не может быть пустым')

        # Валидация порта
        if not (1 <= self.port <= 65535):
            raise ValueError('PORT должен быть в диапазоне 1-65535')

        if self.log_level not in LOG_LEVELS:
            raise ValueError(f'LOG_LEVEL должен быть одним из: {", ".join(LOG_LEVELS)}')

    @property
    def alerts_endpoint(self) -> str:
        """Адрес эндпоинта активных предупреждений.

        Returns:
            str: URL без query-параметров
        """
        return f"{self.alerts_api_base_url}/alerts/active"

    @property
    def is_sentry_enabled(self) -> bool:
        """Проверяет, настроен ли Sentry.

        Returns:
            bool: True если DSN настроен
        """
        return bool(self.sentry_dsn and self.sentry_dsn.strip())


# Глобальный экземпляр настроек
settings = Settings()
