"""Роутер страницы виджета.

Страница содержит поле ввода, кнопку, область ошибки и область
предупреждений. Форма отправляется кнопкой или клавишей Enter,
после чего цикл виджета выполняется на сервере.
"""

from typing import Optional

from fastapi import APIRouter, Request, Depends
from fastapi.responses import HTMLResponse

from api.alerts import limiter, get_alerts_service
from config import settings
from presentation import Page, PageSurface
from services import AlertsWidget, WeatherAlertsService
from utils import get_logger

# Инициализация логгера
logger = get_logger(__name__)

page_router = APIRouter(tags=["page"])


@page_router.get("/", response_class=HTMLResponse)
@limiter.limit(settings.rate_limit)
async def index(
    request: Request,
    state: Optional[str] = None,
    service: WeatherAlertsService = Depends(get_alerts_service)
) -> HTMLResponse:
    """Отдать страницу виджета.

    Без параметра state возвращается пустая страница. С параметром
    выполняется один цикл запроса и возвращается результат.
    """
    page = Page.create_default(input_value=state or "")

    if state is not None:
        widget = AlertsWidget(PageSurface(page), service)
        result = await widget.handle_get_alerts()
        logger.debug(f"Цикл виджета завершен: {result}")

    return HTMLResponse(page.render())
