"""Обработчик действия виджета погодных предупреждений.

Один вызов проходит цепочку валидация -> запрос -> отображение
и всегда освобождает состояние загрузки.
"""

from typing import Optional

from models import WidgetState
from presentation import RenderingSurface, render_success, render_error, clear_error, clear_input
from services.alerts_api import WeatherAlertsService
from services.exceptions import ValidationError, WidgetError
from services.validator import validate_region_code
from utils import metrics_collector, get_logger

# Инициализация логгера
logger = get_logger(__name__)

ENTER_KEY = "Enter"


class AlertsWidget:
    """Оркестратор цикла запроса предупреждений.

    Состояние интерфейса хранится в явном объекте WidgetState,
    а вывод идет через переданную поверхность отображения.
    """

    def __init__(
        self,
        surface: RenderingSurface,
        alerts_service: WeatherAlertsService,
        state: Optional[WidgetState] = None
    ):
        """Инициализация виджета.

        Args:
            surface: Поверхность отображения
            alerts_service: Сервис получения предупреждений
            state: Состояние интерфейса, по умолчанию новое
        """
        self.surface = surface
        self.alerts_service = alerts_service
        self.state = state if state is not None else WidgetState()

    async def handle_get_alerts(self) -> WidgetState:
        """Выполнить один цикл запроса по текущему вводу.

        Ошибки валидации и запроса показываются в области ошибки
        и не выходят за пределы метода.

        Returns:
            WidgetState: Состояние после завершения цикла
        """
        raw_input = self.surface.read_input()
        if raw_input is None:
            logger.error("Поле ввода не найдено, запрос не выполнен")
            return self.state

        self.state.reset()
        clear_error(self.surface)
        self._set_busy(True)

        try:
            region = validate_region_code(raw_input)
            data = await self.alerts_service.fetch_alerts(region)

            render_success(self.surface, data)
            clear_input(self.surface)
            outcome = "success"

        except ValidationError as e:
            logger.info(f"Некорректный ввод '{raw_input}': {e}")
            self._show_error(str(e))
            outcome = "validation_error"

        except WidgetError as e:
            self._show_error(str(e))
            outcome = "api_error"

        except Exception as e:
            logger.exception(f"Непредвиденная ошибка цикла виджета: {e}")
            self._show_error(str(e) or type(e).__name__)
            outcome = "unexpected_error"

        finally:
            self._set_busy(False)

        metrics_collector.record_widget_cycle(outcome)
        return self.state

    async def handle_key_press(self, key: str) -> WidgetState:
        """Enter в поле ввода равносилен нажатию кнопки.

        Args:
            key: Имя нажатой клавиши

        Returns:
            WidgetState: Состояние виджета
        """
        if key == ENTER_KEY:
            return await self.handle_get_alerts()
        return self.state

    def _set_busy(self, busy: bool) -> None:
        self.state.busy = busy
        self.surface.set_busy(busy)

    def _show_error(self, message: str) -> None:
        self.state.error_text = message
        try:
            render_error(self.surface, message)
        except Exception as e:
            logger.exception(f"Не удалось показать ошибку '{message}': {e}")
