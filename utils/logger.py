"""Логирование Weather Alerts Widget на loguru.

Уровень и файл логов берутся из Settings (LOG_LEVEL, LOG_FILE).
Рядом с основным файлом пишется файл только с ошибками.
"""

import sys
from pathlib import Path
from typing import List, Optional, Tuple

from loguru import logger

from config.settings import Settings, settings

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<level>{message}</level>"
)


def error_log_path(log_file: str) -> Path:
    """Путь файла ошибок рядом с основным логом.

    Args:
        log_file: Путь основного файла логов

    Returns:
        Path: например logs/today_errors.log для logs/today.log
    """
    path = Path(log_file)
    return path.with_name(f"{path.stem}_errors{path.suffix}")


def _file_sinks(log_file: str, log_level: str) -> List[Tuple[Path, str]]:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    return [(path, log_level), (error_log_path(log_file), "ERROR")]


def setup_logging(
    config: Optional[Settings] = None,
    rotation: str = "1 day",
    retention: str = "10 days",
    enable_console: bool = True
) -> List[int]:
    """Пересоздать обработчики loguru по настройкам приложения.

    Args:
        config: Настройки, по умолчанию глобальный settings
        rotation: Период ротации файлов
        retention: Период хранения файлов
        enable_console: Писать ли в stdout

    Returns:
        List[int]: Идентификаторы добавленных обработчиков
    """
    config = config or settings
    logger.remove()

    handler_ids = []
    if enable_console:
        handler_ids.append(logger.add(
            sys.stdout,
            format=LOG_FORMAT,
            level=config.log_level,
            colorize=True,
            backtrace=True,
            diagnose=True
        ))

    if config.log_file:
        for path, level in _file_sinks(config.log_file, config.log_level):
            handler_ids.append(logger.add(
                path,
                format=LOG_FORMAT,
                level=level,
                rotation=rotation,
                retention=retention,
                compression="zip",
                backtrace=True,
                diagnose=True
            ))

    logger.info(
        f"Логирование: уровень {config.log_level}, файл {config.log_file or 'не используется'}"
    )
    return handler_ids


def get_logger(name: str = None):
    """Логгер с привязанным именем модуля."""
    if name:
        return logger.bind(name=name)
    return logger


def log_api_request(method: str, url: str, status_code: int, duration: float):
    """Записать запрос к внешнему API.

    Ответы вне 2xx пишутся с уровнем WARNING.

    Args:
        method: HTTP метод
        url: URL запроса
        status_code: Код ответа
        duration: Длительность запроса в секундах
    """
    level = "INFO" if 200 <= status_code < 300 else "WARNING"
    logger.log(level, f"{method} {url} -> {status_code} ({duration:.3f}s)")


setup_logging()
