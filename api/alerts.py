"""API роутеры для эндпоинтов погодных предупреждений.

Предоставляет FastAPI роутеры для получения активных
предупреждений api.weather.gov по коду региона в формате JSON.
"""

import time
from typing import Dict, Optional

from fastapi import APIRouter, Request, HTTPException, Depends
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded

from services import WeatherAlertsService, ValidationError, WidgetError, validate_region_code
from models import HealthCheckResponse
from presentation import format_summary
from utils import metrics_collector, get_logger
from config import settings

# Инициализация логгера
logger = get_logger(__name__)

# Инициализация limiter
limiter = Limiter(key_func=get_remote_address)

# Создание роутера
alerts_router = APIRouter(prefix="/api/v1", tags=["alerts"])

# Глобальная переменная для хранения состояния сервиса
_alerts_service: Optional[WeatherAlertsService] = None


def get_alerts_service() -> WeatherAlertsService:
    """Dependency injection для сервиса предупреждений.

    Returns:
        WeatherAlertsService: Экземпляр сервиса
    """
    global _alerts_service
    if _alerts_service is None:
        _alerts_service = WeatherAlertsService()
    return _alerts_service


def close_alerts_service() -> None:
    """Закрыть сервис предупреждений, если он был создан."""
    global _alerts_service
    if _alerts_service is not None:
        _alerts_service.close()
        _alerts_service = None


@alerts_router.get("/alerts/{region}")
@limiter.limit(settings.rate_limit)
async def get_region_alerts(
    request: Request,
    region: str,
    service: WeatherAlertsService = Depends(get_alerts_service)
) -> Dict:
    """Получить активные предупреждения для региона.

    Args:
        request: FastAPI Request объект
        region: Двухбуквенный код региона (регистр не важен)
        service: Сервис предупреждений

    Returns:
        Dict: Сводка и заголовки предупреждений

    Raises:
        HTTPException: 400 при некорректном коде, 502 при ошибке API
    """
    start_time = time.time()
    endpoint = "/api/v1/alerts/{region}"

    try:
        region_code = validate_region_code(region)
        data = await service.fetch_alerts(region_code)

    except ValidationError as e:
        metrics_collector.record_http_request("GET", endpoint, 400, time.time() - start_time)
        logger.warning(f"Некорректный код региона '{region}': {e}")
        raise HTTPException(status_code=400, detail=str(e))

    except WidgetError as e:
        metrics_collector.record_http_request("GET", endpoint, 502, time.time() - start_time)
        logger.error(f"Ошибка получения предупреждений для '{region}': {e}")
        raise HTTPException(status_code=502, detail=str(e))

    metrics_collector.record_http_request("GET", endpoint, 200, time.time() - start_time)
    logger.info(f"Запрос предупреждений {region_code}: {data.alert_count}")

    return {
        "region": region_code,
        "title": data.display_title,
        "count": data.alert_count,
        "summary": format_summary(data),
        "headlines": data.headlines
    }


@alerts_router.get("/health")
async def health_check() -> HealthCheckResponse:
    """Проверить здоровье сервиса.

    Returns:
        HealthCheckResponse: Статус здоровья сервиса
    """
    # Сервис создается лениво, до первого запроса он еще не запущен
    dependencies = {
        "alerts_service": "ok" if _alerts_service is not None else "not_started",
        "weather_api": settings.alerts_api_base_url
    }

    metrics_collector.update_system_status(True)
    logger.debug(f"Health check: {dependencies}")

    return HealthCheckResponse(status="healthy", dependencies=dependencies)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    """Обработчик превышения лимита запросов."""
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Too many requests",
            "error": "rate_limit_exceeded",
            "retry_after": "60"
        }
    )
