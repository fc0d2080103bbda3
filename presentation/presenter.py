"""Отображение результата запроса на поверхности виджета."""

from models import AlertResponse
from presentation.surface import RenderingSurface


def format_summary(data: AlertResponse) -> str:
    """Сводка вида "{title}: {count}".

    Args:
        data: Ответ API

    Returns:
        str: Строка сводки
    """
    return f"{data.display_title}: {data.alert_count}"


def render_success(surface: RenderingSurface, data: AlertResponse) -> None:
    """Показать сводку и, если предупреждения есть, список заголовков.

    Предыдущее содержимое очищается. При нулевом количестве
    отображается только сводка, без пустого списка.

    Args:
        surface: Поверхность отображения
        data: Ответ API
    """
    surface.clear_display()
    surface.show_summary(format_summary(data))

    if data.alert_count > 0:
        surface.show_headlines(data.headlines)


def render_error(surface: RenderingSurface, message: str) -> None:
    surface.show_error(message)


def clear_error(surface: RenderingSurface) -> None:
    surface.clear_error()


def clear_input(surface: RenderingSurface) -> None:
    surface.clear_input()
