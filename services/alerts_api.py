"""Сервис для работы с API api.weather.gov.

Обеспечивает получение активных погодных предупреждений
для региона и преобразование ошибок в исключения виджета.
"""

import time
import asyncio
from typing import Optional

import requests
import sentry_sdk
from loguru import logger
from pydantic import ValidationError as PydanticValidationError

from config import settings
from models import AlertResponse, ApiError
from services.exceptions import WidgetError, HttpError, ParseError, NetworkError
from utils import metrics_collector, log_api_request


class WeatherAlertsService:
    """Сервис для получения активных предупреждений api.weather.gov.

    Выполняет ровно один GET запрос на вызов, без повторов
    и без собственного таймаута.
    """

    def __init__(self, base_url: Optional[str] = None):
        """Инициализация сервиса.

        Args:
            base_url: Корень API, по умолчанию из настроек
        """
        self.settings = settings
        self.base_url = (base_url or self.settings.alerts_api_base_url).rstrip("/")
        self.session = requests.Session()
        self._setup_session()

    def _setup_session(self) -> None:
        """Настройка HTTP сессии."""
        # api.weather.gov отклоняет запросы без User-Agent
        self.session.headers.update({
            "Accept": "application/geo+json",
            "User-Agent": self.settings.user_agent
        })

    def build_url(self, region: str) -> str:
        """Построить URL запроса активных предупреждений.

        Args:
            region: Проверенный код региона

        Returns:
            str: Полный URL с параметром area
        """
        return f"{self.base_url}/alerts/active?area={region}"

    def _create_error_log(self, error: Exception, region: Optional[str] = None) -> ApiError:
        """Создание объекта ошибки для логирования.

        Args:
            error: Исключение
            region: Код региона запроса

        Returns:
            ApiError: Объект ошибки для логирования
        """
        return ApiError(
            error_type=type(error).__name__,
            message=str(error),
            region=region
        )

    async def _make_request(self, url: str, region: str) -> requests.Response:
        """Выполнение HTTP запроса в рабочем потоке.

        Args:
            url: URL запроса
            region: Код региона для логов

        Returns:
            requests.Response: Ответ от API

        Raises:
            NetworkError: При ошибке транспорта
        """
        try:
            return await asyncio.to_thread(self.session.get, url)

        except requests.exceptions.RequestException as e:
            error_log = self._create_error_log(e, region)
            logger.error(f"Ошибка соединения с API ({region}): {error_log.message}")
            if self.settings.is_sentry_enabled:
                sentry_sdk.capture_exception(e)
            raise NetworkError(str(e)) from e

    def _parse_response(self, response: requests.Response) -> AlertResponse:
        """Разбор тела ответа.

        Args:
            response: Успешный ответ API

        Returns:
            AlertResponse: Разобранные данные

        Raises:
            ParseError: Если тело не JSON или не похоже на коллекцию предупреждений
        """
        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError() from e

        logger.debug(f"Получены данные: {payload}")

        try:
            return AlertResponse.model_validate(payload)
        except PydanticValidationError as e:
            raise ParseError("Unexpected alerts data format in the API response") from e

    async def fetch_alerts(self, region: str) -> AlertResponse:
        """Получить активные предупреждения для региона.

        Args:
            region: Проверенный код региона (две заглавные буквы)

        Returns:
            AlertResponse: Ответ API

        Raises:
            HttpError: Если статус ответа не 2xx
            ParseError: Если тело ответа некорректно
            NetworkError: При ошибке транспорта
        """
        url = self.build_url(region)
        start_time = time.time()

        try:
            response = await self._make_request(url, region)
            log_api_request("GET", url, response.status_code, time.time() - start_time)

            if not 200 <= response.status_code < 300:
                raise HttpError(response.status_code, response.reason)

            data = self._parse_response(response)

        except WidgetError as e:
            logger.warning(f"Ошибка: {e}")
            metrics_collector.record_api_request(_status_label(e), time.time() - start_time)
            raise

        metrics_collector.record_api_request("success", time.time() - start_time)
        metrics_collector.update_alert_count(region, data.alert_count)
        logger.info(f"Получено {data.alert_count} предупреждений для {region}")
        return data

    def close(self) -> None:
        """Закрыть HTTP сессию."""
        if self.session:
            self.session.close()
            logger.debug("HTTP сессия закрыта")


def _status_label(error: WidgetError) -> str:
    if isinstance(error, HttpError):
        return "http_error"
    if isinstance(error, ParseError):
        return "parse_error"
    return "network_error"
