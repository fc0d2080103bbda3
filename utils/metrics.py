"""Модуль для работы с Prometheus метриками.

Предоставляет инструменты для сбора и экспорта метрик
производительности и работы виджета.
"""

import time
from typing import Dict, Optional

from prometheus_client import Gauge, Counter, Histogram, generate_latest
from prometheus_client.core import CollectorRegistry
from loguru import logger


class MetricsCollector:
    """Коллектор Prometheus метрик для Weather Alerts Widget.

    Сбор метрик:
    - Количество запросов к api.weather.gov и время ответа
    - Количество циклов виджета по результату
    - Количество предупреждений в последнем ответе по региону
    - HTTP запросы к самому приложению
    - Статус работы системы
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        """Инициализация коллектора метрик.

        Args:
            registry: Реестр метрик Prometheus
        """
        self.registry = registry or CollectorRegistry()

        # Метрики API запросов
        self.api_requests_total = Counter(
            'weather_alert_api_requests_total',
            'Общее количество запросов к API',
            ['status'],
            registry=self.registry
        )

        self.api_request_duration = Histogram(
            'weather_alert_api_request_duration_seconds',
            'Время выполнения запроса к API',
            registry=self.registry
        )

        # Метрики циклов виджета
        self.widget_cycles_total = Counter(
            'weather_alert_widget_cycles_total',
            'Количество циклов запроса виджета',
            ['outcome'],
            registry=self.registry
        )

        self.alerts_returned = Gauge(
            'weather_alert_alerts_returned',
            'Количество предупреждений в последнем ответе',
            ['region'],
            registry=self.registry
        )

        # Метрики HTTP endpoints
        self.http_requests_total = Counter(
            'weather_alert_http_requests_total',
            'Общее количество HTTP запросов',
            ['method', 'endpoint', 'status'],
            registry=self.registry
        )

        self.http_request_duration = Histogram(
            'weather_alert_http_request_duration_seconds',
            'Время выполнения HTTP запроса',
            ['method', 'endpoint'],
            registry=self.registry
        )

        # Метрики работы системы
        self.system_status = Gauge(
            'weather_alert_system_status',
            'Статус работы системы (1 - работает, 0 - ошибка)',
            registry=self.registry
        )

        self.start_time = Gauge(
            'weather_alert_start_time_timestamp',
            'Время запуска приложения в формате UNIX времени',
            registry=self.registry
        )

        self.start_time.set(time.time())

        logger.info("Коллектор Prometheus метрик инициализирован")

    def record_api_request(self, status: str, duration: float) -> None:
        """Записать метрику запроса к API.

        Args:
            status: Статус запроса (success, http_error, parse_error, network_error)
            duration: Длительность запроса в секундах
        """
        try:
            self.api_requests_total.labels(status=status).inc()
            self.api_request_duration.observe(duration)

            logger.debug(f"Записана метрика API: статус={status}, длительность={duration:.3f}s")

        except Exception as e:
            logger.error(f"Ошибка при записи метрики API запроса: {e}")

    def record_widget_cycle(self, outcome: str) -> None:
        """Записать результат цикла виджета.

        Args:
            outcome: Результат (success, validation_error, api_error)
        """
        try:
            self.widget_cycles_total.labels(outcome=outcome).inc()
        except Exception as e:
            logger.error(f"Ошибка при записи метрики цикла виджета: {e}")

    def update_alert_count(self, region: str, count: int) -> None:
        """Обновить количество предупреждений для региона.

        Args:
            region: Код региона
            count: Количество предупреждений
        """
        try:
            self.alerts_returned.labels(region=region).set(count)
            logger.debug(f"Метрика предупреждений обновлена: {region}={count}")
        except Exception as e:
            logger.error(f"Ошибка при обновлении метрики предупреждений: {e}")

    def record_http_request(
        self,
        method: str,
        endpoint: str,
        status_code: int,
        duration: float
    ) -> None:
        """Записать метрику HTTP запроса.

        Args:
            method: HTTP метод
            endpoint: Эндпоинт
            status_code: Код статуса ответа
            duration: Длительность запроса в секундах
        """
        try:
            status_category = 'success' if 200 <= status_code < 300 else 'error'

            self.http_requests_total.labels(
                method=method,
                endpoint=endpoint,
                status=status_category
            ).inc()

            self.http_request_duration.labels(
                method=method,
                endpoint=endpoint
            ).observe(duration)

            logger.debug(
                f"Записана метрика HTTP: {method} {endpoint} -> {status_code} ({duration:.3f}s)"
            )

        except Exception as e:
            logger.error(f"Ошибка при записи метрики HTTP запроса: {e}")

    def update_system_status(self, is_healthy: bool) -> None:
        """Обновить метрику статуса системы.

        Args:
            is_healthy: True если система работает корректно
        """
        try:
            self.system_status.set(1 if is_healthy else 0)

            status_str = "здоров" if is_healthy else "ошибка"
            logger.debug(f"Статус системы обновлен: {status_str}")

        except Exception as e:
            logger.error(f"Ошибка при обновлении метрики статуса системы: {e}")

    def get_metrics(self) -> str:
        """Получить все метрики в формате Prometheus.

        Returns:
            str: Метрики в формате Prometheus
        """
        try:
            metrics_data = generate_latest(self.registry)
            return metrics_data.decode('utf-8')

        except Exception as e:
            logger.error(f"Ошибка при генерации метрик: {e}")
            return ""

    def get_sample_value(self, name: str, labels: Optional[Dict[str, str]] = None) -> Optional[float]:
        """Получить текущее значение метрики из реестра.

        Args:
            name: Имя сэмпла (например weather_alert_api_requests_total)
            labels: Метки сэмпла

        Returns:
            Optional[float]: Значение или None если сэмпла нет
        """
        return self.registry.get_sample_value(name, labels or {})


# Глобальный экземпляр коллектора метрик
metrics_collector = MetricsCollector()
