import os
import pytest
from unittest.mock import patch

from loguru import logger

from config.settings import Settings
from utils.logger import setup_logging, error_log_path, log_api_request


@pytest.fixture
def restore_logging():
    """Вернуть обработчики по глобальным настройкам после теста"""
    yield
    setup_logging()


class TestSetupLogging:
    """Тесты настройки логирования"""

    def test_error_log_path(self):
        """Тест имени файла ошибок"""
        assert str(error_log_path("logs/today.log")) == os.path.join("logs", "today_errors.log")

    def test_file_sinks_from_settings(self, tmp_path, restore_logging):
        """Тест файлов логов по LOG_FILE и LOG_LEVEL"""
        log_file = tmp_path / "nested" / "widget.log"
        with patch.dict(os.environ, {"LOG_FILE": str(log_file), "LOG_LEVEL": "WARNING"}):
            config = Settings()

        handler_ids = setup_logging(config, enable_console=False)
        logger.info("info message")
        logger.error("error message")
        setup_logging()

        assert len(handler_ids) == 2
        main_log = log_file.read_text(encoding="utf-8")
        errors_log = error_log_path(str(log_file)).read_text(encoding="utf-8")
        assert "error message" in main_log
        assert "info message" not in main_log
        assert "error message" in errors_log

    def test_console_only_without_log_file(self, restore_logging):
        """Тест что без LOG_FILE остается только консоль"""
        with patch.dict(os.environ, {"LOG_FILE": ""}):
            config = Settings()

        handler_ids = setup_logging(config)

        assert len(handler_ids) == 1


class TestApiRequestLog:
    """Тесты записи запросов к API"""

    @pytest.fixture
    def records(self):
        captured = []
        sink_id = logger.add(lambda message: captured.append(message.record), level="DEBUG")
        yield captured
        logger.remove(sink_id)

    def test_success_is_info(self, records):
        """Тест уровня для 2xx ответа"""
        log_api_request("GET", "https://api.weather.gov/alerts/active?area=NY", 200, 0.25)

        assert records[-1]["level"].name == "INFO"
        assert records[-1]["message"] == "GET https://api.weather.gov/alerts/active?area=NY -> 200 (0.250s)"

    @pytest.mark.parametrize("status_code", [302, 404, 500])
    def test_non_2xx_is_warning(self, records, status_code):
        """Тест уровня для ответа вне 2xx"""
        log_api_request("GET", "https://api.weather.gov/alerts/active?area=NY", status_code, 0.1)

        assert records[-1]["level"].name == "WARNING"
