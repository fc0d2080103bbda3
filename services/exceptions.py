"""Исключения виджета погодных предупреждений.

Все ошибки, которые оркестратор превращает в сообщение
для пользователя, наследуются от WidgetError.
"""

from typing import Optional


class WidgetError(Exception):
    """Базовая ошибка цикла запроса."""


class ValidationError(WidgetError):
    """Некорректный код региона во вводе пользователя."""


class HttpError(WidgetError):
    """API вернул статус, отличный от 2xx.

    Attributes:
        status: HTTP код ответа
        status_text: Текстовое описание статуса
    """

    def __init__(self, status: int, status_text: Optional[str] = ""):
        self.status = status
        self.status_text = status_text or ""
        super().__init__(f"API Error: {status} {self.status_text}")


class ParseError(WidgetError):
    """Тело ответа не является ожидаемым JSON."""

    def __init__(self, message: str = "Unable to read alerts data from the API response"):
        super().__init__(message)


class NetworkError(WidgetError):
    """Ошибка транспорта: нет соединения, DNS, таймаут платформы."""
