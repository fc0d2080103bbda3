"""Основной файл приложения Weather Alerts Widget.

FastAPI приложение со страницей виджета активных погодных
предупреждений api.weather.gov, JSON API и Prometheus метриками.
"""

from contextlib import asynccontextmanager

import sentry_sdk
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from prometheus_fastapi_instrumentator import Instrumentator
from slowapi.errors import RateLimitExceeded

from config import settings
from api import alerts_router, monitoring_router, page_router, limiter, rate_limit_handler
from api.alerts import get_alerts_service, close_alerts_service
from utils import metrics_collector, get_logger

# Инициализация логгера
logger = get_logger(__name__)


def create_application() -> FastAPI:
    """Создать и настроить FastAPI приложение.

    Returns:
        FastAPI: Настроенное приложение
    """
    _setup_sentry()

    app = FastAPI(
        title="Weather Alerts Widget",
        description="Active weather alerts by state from api.weather.gov",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    _setup_middleware(app)
    _setup_routers(app)
    _setup_exception_handlers(app)
    _setup_prometheus(app)

    return app


def _setup_sentry() -> None:
    """Настроить Sentry для мониторинга ошибок."""
    if settings.is_sentry_enabled:
        try:
            sentry_sdk.init(
                dsn=settings.sentry_dsn,
                traces_sample_rate=0.1,
                environment="production" if settings.cors_origins != ["*"] else "development"
            )
            logger.info("Sentry инициализирован для мониторинга ошибок")
        except Exception as e:
            logger.error(f"Ошибка инициализации Sentry: {e}")
    else:
        logger.info("Sentry отключен")


def _setup_middleware(app: FastAPI) -> None:
    """Настроить middleware приложения.

    Args:
        app: FastAPI приложение
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"]
    )

    # Rate limiting
    app.state.limiter = limiter

    logger.info("Middleware настроены")


def _setup_routers(app: FastAPI) -> None:
    """Настроить роутеры приложения.

    Args:
        app: FastAPI приложение
    """
    app.include_router(page_router)
    app.include_router(alerts_router)
    app.include_router(monitoring_router)

    logger.info("Роутеры настроены")


def _setup_exception_handlers(app: FastAPI) -> None:
    """Настроить обработчики исключений.

    Args:
        app: FastAPI приложение
    """
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        """Общий обработчик исключений."""
        logger.error(f"Необработанная ошибка: {exc}")

        if settings.is_sentry_enabled:
            sentry_sdk.capture_exception(exc)

        metrics_collector.record_http_request(
            method=request.method,
            endpoint=request.url.path,
            status_code=500,
            duration=0
        )

        return JSONResponse(
            status_code=500,
            content={
                "detail": "Internal server error",
                "error": "internal_server_error"
            }
        )

    logger.info("Обработчики исключений настроены")


def _setup_prometheus(app: FastAPI) -> None:
    """Настроить Prometheus метрики.

    Args:
        app: FastAPI приложение
    """
    try:
        Instrumentator(
            should_group_status_codes=False,
            should_ignore_untemplated=True,
            should_group_untemplated=True,
            excluded_handlers=["/metrics", "/metrics/http"],
            env_var_name="ENABLE_METRICS",
        ).instrument(app).expose(app, endpoint="/metrics/http", include_in_schema=False)

        logger.info("Prometheus метрики настроены")
    except Exception as e:
        logger.error(f"Ошибка настройки Prometheus: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Контекстный менеджер жизненного цикла приложения.

    Args:
        app: FastAPI приложение
    """
    logger.info("Запуск приложения Weather Alerts Widget")

    get_alerts_service()
    logger.info("Сервис предупреждений инициализирован")

    try:
        yield
    finally:
        logger.info("Остановка приложения")
        close_alerts_service()
        logger.info("Приложение остановлено")


# Создание приложения
app = create_application()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Запуск сервера на порту {settings.port}")
    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=settings.port,
        reload=True,
        log_level="info"
    )
