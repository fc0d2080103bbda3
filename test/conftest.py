import pytest
import sys
import os
from unittest.mock import Mock

# Логи в файл в тестах не пишем
os.environ.setdefault("LOG_FILE", "")

# Добавляем корневую директорию в path для импорта модулей
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger

from presentation import Page, PageSurface


@pytest.fixture
def two_alerts_payload():
    """Фикстура ответа API с двумя предупреждениями, у второго нет заголовка"""
    return {
        "title": "T",
        "features": [
            {"properties": {"headline": "H1"}},
            {"properties": {}}
        ]
    }


@pytest.fixture
def make_response():
    """Фабрика mock ответов requests"""
    def _make(payload=None, status_code=200, reason="OK", json_error=None):
        response = Mock()
        response.status_code = status_code
        response.reason = reason
        if json_error is not None:
            response.json.side_effect = json_error
        else:
            response.json.return_value = payload
        return response
    return _make


@pytest.fixture
def page():
    """Страница виджета в исходном состоянии"""
    return Page.create_default()


@pytest.fixture
def surface(page):
    """Поверхность отображения поверх страницы"""
    return PageSurface(page)


@pytest.fixture
def error_logs():
    """Сообщения loguru уровня ERROR, записанные во время теста"""
    messages = []
    sink_id = logger.add(lambda message: messages.append(message.record["message"]), level="ERROR")
    yield messages
    logger.remove(sink_id)
