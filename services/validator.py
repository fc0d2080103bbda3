"""Валидация кода региона, введенного пользователем."""

import re
from typing import Optional

from config.widget import EMPTY_INPUT_MESSAGE, WRONG_FORMAT_MESSAGE
from services.exceptions import ValidationError

REGION_CODE_PATTERN = re.compile(r"[A-Z]{2}")


def validate_region_code(raw_input: Optional[str]) -> str:
    """Проверить и нормализовать код региона.

    Args:
        raw_input: Значение поля ввода как есть

    Returns:
        str: Код из двух заглавных латинских букв

    Raises:
        ValidationError: Если ввод пустой или не из двух букв
    """
    if raw_input is None or not raw_input.strip():
        raise ValidationError(EMPTY_INPUT_MESSAGE)

    region = raw_input.strip().upper()

    if not REGION_CODE_PATTERN.fullmatch(region):
        raise ValidationError(WRONG_FORMAT_MESSAGE)

    return region
